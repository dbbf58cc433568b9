from django.urls import path

from . import views


urlpatterns = [

    path('formations/', views.FormationListView.as_view(), name='formation-list'),

    path('formations/<str:formation_id>/layout', views.FormationLayoutView.as_view(), name='formation-layout'),

    path('teams/<int:team_id>/formation-templates', views.FormationTemplateListCreateView.as_view(), name='formation-template-list-create'),

]
