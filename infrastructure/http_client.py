"""Shared blocking HTTP client with configurable timeout."""

from typing import Any, Mapping, Optional

import httpx

from shared.logging import get_logger

log = get_logger(__name__)


class HttpClient:
    """Thin wrapper around httpx.Client with a configurable timeout.

    Form verification runs inside the host's request handling and blocks for
    the round trip, so this is deliberately the synchronous client.
    """

    def __init__(
        self, timeout: float = 5.0, transport: Optional[httpx.BaseTransport] = None
    ) -> None:
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return self._client.post(url, **kwargs)

    def post_form(self, url: str, data: Mapping[str, str]) -> Optional[str]:
        """POST a URL-encoded form and return the body text.

        Returns None when no usable body came back: connection errors,
        timeouts and non-2xx statuses all count as transport failures.
        """
        try:
            response = self._client.post(url, data=dict(data))
        except httpx.HTTPError as e:
            log.error(
                "http_post_failed", url=url, error=str(e), error_type=type(e).__name__
            )
            return None
        if not response.is_success:
            log.error(
                "http_post_bad_status",
                url=url,
                status_code=response.status_code,
                response_text=response.text[:200],
            )
            return None
        return response.text

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
