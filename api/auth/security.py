"""
Access-token verification for tokens issued by the external auth provider.

The frontend signs users in against the provider directly; the API only
checks the resulting bearer token.
"""

from __future__ import annotations

from typing import Any

import jwt

from core import settings


class AuthSecurityError(RuntimeError):
    pass


def auth_enabled() -> bool:
    return bool(settings.auth_jwt_secret())


def decode_access_token(token: str) -> dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Access token is empty.")

    audience = settings.auth_jwt_audience()
    try:
        payload = jwt.decode(
            raw,
            settings.auth_jwt_secret(),
            algorithms=[settings.auth_jwt_algorithm()],
            audience=audience or None,
            options={"verify_aud": bool(audience)},
        )
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid access token.") from exc

    if not str(payload.get("sub") or "").strip():
        raise AuthSecurityError("Access token has no subject.")

    return payload
