from django.apps import AppConfig


class DepthChartConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'depth_chart'
