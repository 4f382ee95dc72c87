"""
Outbound webhook client for the external automation engine.

The engine (n8n) exposes one webhook URL per client. We POST a small JSON
payload and only care whether it answered with a 2xx.
"""

from __future__ import annotations

from typing import Any

import httpx


# Webhook failures are explicit and separable from other runtime errors.
class WebhookError(RuntimeError):
    pass


async def post_json(
    url: str,
    payload: dict[str, Any],
    *,
    timeout_s: float = 30.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.Response:
    """
    POST `payload` to `url`. Raises WebhookError on transport failure or a
    non-2xx answer.
    """
    url = (url or "").strip()
    if not url:
        raise WebhookError("Webhook URL is empty.")

    try:
        async with httpx.AsyncClient(timeout=timeout_s, transport=transport) as client:
            resp = await client.post(url, json=payload)
    except httpx.HTTPError as exc:
        raise WebhookError(f"Webhook request failed: {exc}") from exc

    if not resp.is_success:
        # Avoid dumping huge bodies; include a small snippet.
        body = resp.text[:500]
        raise WebhookError(f"Webhook responded with {resp.status_code}: {body or 'No body'}")

    return resp
