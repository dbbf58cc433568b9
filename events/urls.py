from django.urls import path

from . import views


urlpatterns = [

    path('teams/<int:team_id>/events', views.EventListCreateView.as_view(), name='event-list-create'),

    path('teams/<int:team_id>/events/settings', views.CalendarSettingsView.as_view(), name='calendar-settings'),

    path('teams/<int:team_id>/events/<int:pk>', views.EventRetrieveUpdateDeleteView.as_view(), name='event-rud'),

    path('teams/<int:team_id>/events/<int:pk>/audience', views.EventAudienceView.as_view(), name='event-audience'),

]
