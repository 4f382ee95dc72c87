"""
Environment-backed configuration.

Values are read on every call so tests can monkeypatch the environment.
The CORS allow-list is the exception: `main.py` computes it once at startup.
"""

from __future__ import annotations

import os

REQUIRED_ENV = ("DATABASE_URL",)

DEFAULT_FRONTEND_URL = "http://localhost:5173"
DEFAULT_PORT = 3001


def _env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def missing_required_env() -> list[str]:
    return [name for name in REQUIRED_ENV if not os.environ.get(name, "").strip()]


def database_url() -> str:
    return _env_str("DATABASE_URL")


def db_pool_max_size() -> int:
    return max(1, _env_int("DB_POOL_MAX_SIZE", 5))


def frontend_origins() -> list[str]:
    raw = _env_str("FRONTEND_URL", DEFAULT_FRONTEND_URL)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def host() -> str:
    return _env_str("HOST", "0.0.0.0")


def port() -> int:
    return _env_int("PORT", DEFAULT_PORT)


def frontend_dist_override() -> str:
    return _env_str("FRONTEND_DIST_PATH")


def automation_webhook_timeout_s() -> float:
    return _env_float("AUTOMATION_WEBHOOK_TIMEOUT_S", 30.0)


def auth_jwt_secret() -> str:
    return _env_str("AUTH_JWT_SECRET")


def auth_jwt_algorithm() -> str:
    return _env_str("AUTH_JWT_ALG", "HS256")


def auth_jwt_audience() -> str:
    # Supabase-issued access tokens carry aud="authenticated".
    return _env_str("AUTH_JWT_AUDIENCE", "authenticated")


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO")


def log_format() -> str:
    return _env_str("LOG_FORMAT", "text")
