# users/tokens.py

from __future__ import annotations

from rest_framework_simplejwt.tokens import RefreshToken


def issue_tokens_for_user(user, *, company_id=None) -> dict:
    """
    Access + refresh pair. The access token carries company_id so clients
    (and the socket handshake) can address the company without another lookup.
    """
    refresh = RefreshToken.for_user(user)
    refresh["email"] = user.email
    refresh["role"] = user.role
    if company_id is not None:
        refresh["company_id"] = str(company_id)

    return {
        "access": str(refresh.access_token),
        "refresh": str(refresh),
    }
