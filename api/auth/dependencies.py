"""
Auth dependencies for admin routes.

When AUTH_JWT_SECRET is unset the API runs open (local development), and
`get_current_user` returns None.
"""

from __future__ import annotations

from fastapi import Header, HTTPException, status

from . import security


def _extract_bearer_token(authorization: str | None) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing Authorization header.",
        )

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid Authorization header format.",
        )

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization must be: Bearer <token>.",
        )
    return token


async def get_current_user(authorization: str | None = Header(default=None)) -> dict | None:
    if not security.auth_enabled():
        return None

    token = _extract_bearer_token(authorization)
    try:
        claims = security.decode_access_token(token)
    except security.AuthSecurityError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc

    return {"id": str(claims["sub"]), "email": claims.get("email")}
