"""
Form rules shared with the frontend: URL format, platform hosts, list caps.
"""

from __future__ import annotations

from urllib.parse import urlsplit

CLIENT_STATUSES = ("active", "paused")
MAX_COMPETITOR_URLS = 5

PLATFORM_HOSTS = {
    "instagram": "instagram.com",
    "tiktok": "tiktok.com",
}

PLATFORM_LABELS = {
    "instagram": "Instagram",
    "tiktok": "TikTok",
}


def is_valid_url(url: str | None) -> bool:
    """
    Absolute http(s) URL with a host. Empty values are allowed.
    """
    if not url:
        return True
    try:
        parts = urlsplit(url.strip())
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(parts.hostname)


def is_platform_url(url: str, platform: str) -> bool:
    if not url or not url.strip():
        return True
    try:
        parts = urlsplit(url.strip())
    except ValueError:
        return False
    host = (parts.hostname or "").lower()
    if parts.scheme not in ("http", "https") or not host:
        return False
    needle = PLATFORM_HOSTS.get(platform)
    return needle is None or needle in host


def clean_list(values: list[str] | None) -> list[str]:
    """
    Trim entries and drop the empty ones, keeping order.
    """
    return [v.strip() for v in (values or []) if v and v.strip()]


def competitor_urls_error(urls: list[str], platform: str) -> str | None:
    label = PLATFORM_LABELS.get(platform, platform)
    for url in urls:
        if not is_platform_url(url, platform):
            return f"Please enter valid {label} URLs (must include {PLATFORM_HOSTS[platform]})"
    if len(urls) > MAX_COMPETITOR_URLS:
        return f"Maximum {MAX_COMPETITOR_URLS} {label} URLs allowed"
    return None
