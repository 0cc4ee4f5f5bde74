"""
PATH: users/middleware.py

REQUEST GATEKEEPER

Coarse edge check that runs before any view:
- Static assets, CORS preflight (OPTIONS) and public prefixes pass through.
- "/" (home) is public as an exact match only.
- Everything else needs a token: the auth cookie or an "Authorization: Bearer" header.
- Missing token -> 401 JSON for /api/ paths, redirect to the login page otherwise.

This middleware checks token PRESENCE only. Signature/expiry validation is
done by users.authentication.CookieJWTAuthentication at the view layer.
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.http import HttpResponseRedirect, JsonResponse

logger = logging.getLogger(__name__)

STATIC_PREFIXES = ("/static/", "/media/")
STATIC_EXACT = {"/favicon.ico"}


def is_static_asset(path: str) -> bool:
    return path in STATIC_EXACT or path.startswith(STATIC_PREFIXES)


def is_public_path(path: str, public_prefixes=None) -> bool:
    if path == "/":
        return True
    prefixes = public_prefixes
    if prefixes is None:
        prefixes = getattr(settings, "AUTH_PUBLIC_PREFIXES", [])
    return any(path.startswith(p) for p in prefixes)


def request_has_token(request) -> bool:
    cookie_name = getattr(settings, "AUTH_COOKIE_NAME", "jwt_token")
    if request.COOKIES.get(cookie_name):
        return True

    header = request.headers.get("Authorization") or ""
    return header.startswith("Bearer ")


class AuthGatekeeperMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        path = request.path

        if request.method == "OPTIONS" or is_static_asset(path) or is_public_path(path):
            return self.get_response(request)

        has_token = request_has_token(request)

        if not has_token:
            if path.startswith("/api/"):
                logger.info("Rejected unauthenticated API request", extra={"path": path})
                return JsonResponse({"detail": "Authentication required"}, status=401)
            return HttpResponseRedirect(getattr(settings, "LOGIN_PAGE_URL", "/company/login"))

        response = self.get_response(request)
        response["Cache-Control"] = "no-store"
        return response
