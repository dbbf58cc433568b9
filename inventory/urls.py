from django.urls import path

from . import views


urlpatterns = [

    path('teams/<int:team_id>/inventory', views.InventoryListCreateView.as_view(), name='inventory-list-create'),

    path('teams/<int:team_id>/inventory/<int:pk>', views.InventoryRetrieveUpdateDeleteView.as_view(), name='inventory-rud'),

    path('teams/<int:team_id>/inventory/<int:pk>/assign', views.InventoryAssignView.as_view(), name='inventory-assign'),

    path('teams/<int:team_id>/inventory/<int:pk>/transactions', views.InventoryTransactionListView.as_view(), name='inventory-transactions'),

]
