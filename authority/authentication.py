from django.conf import settings
from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import AccessToken

from account.models import CustomUser


class CookieJWTAuthentication(BaseAuthentication):
    def authenticate(self, request):
        # Get the access token from the cookies
        access_token = request.COOKIES.get(settings.SIMPLE_JWT['AUTH_COOKIE'])

        if not access_token:
            return None  # Fall through to header authentication

        try:
            token = AccessToken(access_token)
        except TokenError as e:
            raise AuthenticationFailed(f'Invalid token: {e}')

        try:
            user = CustomUser.objects.get(id=token['user_id'])
        except (CustomUser.DoesNotExist, KeyError):
            raise AuthenticationFailed('User not found')

        if not user.is_active:
            raise AuthenticationFailed('User is inactive')

        return (user, token)
