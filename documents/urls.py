from django.urls import path

from . import views


urlpatterns = [

    path('teams/<int:team_id>/documents', views.DocumentListCreateView.as_view(), name='document-list-create'),

    path('teams/<int:team_id>/documents/<int:pk>', views.DocumentRetrieveUpdateDeleteView.as_view(), name='document-rud'),

    path('teams/<int:team_id>/documents/<int:pk>/link', views.DocumentLinkView.as_view(), name='document-link'),

    path('teams/<int:team_id>/events/<int:pk>/documents', views.EventDocumentListView.as_view(), name='event-documents'),

]
