from django.urls import path

from . import views


urlpatterns = [

    path('teams/<int:team_id>/depth-chart', views.DepthChartView.as_view(), name='depth-chart'),

    path('teams/<int:team_id>/depth-chart/assign', views.AssignView.as_view(), name='depth-chart-assign'),

    path('teams/<int:team_id>/depth-chart/remove', views.RemoveView.as_view(), name='depth-chart-remove'),

    path('teams/<int:team_id>/depth-chart/reorder', views.ReorderView.as_view(), name='depth-chart-reorder'),

    path('teams/<int:team_id>/depth-chart/position-labels', views.PositionLabelView.as_view(), name='depth-chart-position-labels'),

]
