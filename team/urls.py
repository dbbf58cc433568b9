from django.urls import path

from . import views


urlpatterns = [

    path('teams/', views.TeamListCreateView.as_view(), name='team-list-create'),

    path('teams/<int:team_id>/members', views.MembershipListView.as_view(), name='team-members'),

    path('teams/<int:team_id>/members/<int:pk>', views.MembershipUpdateView.as_view(), name='team-member-update'),

    path('teams/<int:team_id>/roster', views.RosterListCreateView.as_view(), name='team-roster'),

]
