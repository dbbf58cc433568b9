from django.urls import path

from . import views


urlpatterns = [

    path('teams/<int:team_id>/capabilities', views.CapabilitiesView.as_view(), name='team-capabilities'),

    path('teams/<int:team_id>/audit-logs', views.AuditLogListView.as_view(), name='team-audit-logs'),

]
