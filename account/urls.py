from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView, TokenVerifyView
from . import views


urlpatterns = [

    path('auth/token/refresh', TokenRefreshView.as_view(), name='token_refresh'),

    path('auth/token/verify', TokenVerifyView.as_view(), name='token_verify'),

    path('auth/login', views.LoginView.as_view(), name='login'),

    path('auth/logout', views.LogoutView.as_view(), name='logout'),

]
