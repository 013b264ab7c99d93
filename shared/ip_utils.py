"""
Client IP resolution for FastAPI requests.

The resolved address is forwarded to siteverify as ``remoteip`` so
Cloudflare can match the token against the browser that solved it.
"""

from __future__ import annotations

from fastapi import Request

# Checked in order; the first non-empty value wins
CLIENT_IP_HEADERS: tuple[str, ...] = (
    "CF-Connecting-IP",
    "True-Client-IP",
    "X-Forwarded-For",
    "X-Real-IP",
)


def get_client_ip(request: Request) -> str:
    """Return the requesting client's IP, or ``""`` if none can be found.

    ``X-Forwarded-For`` may carry a proxy chain; only its first hop is used.
    """
    for header in CLIENT_IP_HEADERS:
        value = request.headers.get(header)
        if not value:
            continue
        client_ip = value.split(",")[0].strip()
        if client_ip:
            return client_ip

    return request.client.host if request.client else ""
