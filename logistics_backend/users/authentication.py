"""
PATH: users/authentication.py

COOKIE-OR-BEARER JWT AUTHENTICATION

Lookup order:
1) Authorization: Bearer <token>   (API clients, mobile app)
2) HttpOnly cookie settings.AUTH_COOKIE_NAME  (browser sessions)

Token validation itself is SimpleJWT's; this class only widens where the
raw token may come from.
"""

from __future__ import annotations

from django.conf import settings
from rest_framework_simplejwt.authentication import JWTAuthentication


class CookieJWTAuthentication(JWTAuthentication):
    def authenticate(self, request):
        header = self.get_header(request)
        if header is not None:
            return super().authenticate(request)

        raw_token = request.COOKIES.get(getattr(settings, "AUTH_COOKIE_NAME", "jwt_token"))
        if not raw_token:
            return None

        validated_token = self.get_validated_token(raw_token)
        return self.get_user(validated_token), validated_token
