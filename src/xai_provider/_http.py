"""HTTP client wrapper around httpx."""
from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import httpx

from xai_provider.config import AdapterTimeout
from xai_provider.errors import NetworkError, ProviderError, RequestTimeoutError, error_from_status_code


class HttpClient:
    """Thin wrapper around :mod:`httpx` that maps failures into xai_provider errors."""

    def __init__(
        self,
        base_url: str,
        headers: dict[str, str],
        timeout: AdapterTimeout | None = None,
        *,
        provider: str = "",
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        t = timeout or AdapterTimeout()
        self._provider = provider
        self._client = httpx.Client(
            base_url=base_url,
            headers=headers,
            timeout=httpx.Timeout(t.request, connect=t.connect),
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    def post(self, path: str, json: dict[str, Any]) -> dict[str, Any]:
        """POST a JSON body and return the decoded JSON response.

        Raises a :class:`ProviderError` subclass on non-2xx status.
        """
        try:
            resp = self._client.post(path, json=json)
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(f"Request timed out: {exc}", cause=exc) from exc
        except httpx.HTTPError as exc:
            raise NetworkError(f"Network error: {exc}", cause=exc) from exc

        if resp.status_code >= 300:
            raise self._translate_error(resp)
        try:
            return resp.json()
        except ValueError:
            return {}

    def post_stream(self, path: str, json: dict[str, Any]) -> Iterator[str]:
        """POST a JSON body and yield the raw response lines."""
        try:
            with self._client.stream("POST", path, json=json) as resp:
                if resp.status_code >= 300:
                    resp.read()
                    raise self._translate_error(resp)
                yield from resp.iter_lines()
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(f"Stream timed out: {exc}", cause=exc) from exc
        except httpx.HTTPError as exc:
            raise NetworkError(f"Network error during stream: {exc}", cause=exc) from exc

    def _translate_error(self, resp: httpx.Response) -> ProviderError:
        body: dict[str, Any] | None
        try:
            body = resp.json()
        except ValueError:
            body = None

        message = resp.text
        error_code = None
        error_info = body.get("error") if isinstance(body, dict) else None
        if isinstance(error_info, dict):
            message = error_info.get("message", message)
            error_code = error_info.get("type") or error_info.get("code")
        elif isinstance(error_info, str):
            message = error_info

        retry_after = None
        if "retry-after" in resp.headers:
            try:
                retry_after = float(resp.headers["retry-after"])
            except ValueError:
                retry_after = None

        return error_from_status_code(
            resp.status_code,
            message,
            provider=self._provider,
            error_code=error_code,
            raw=body if isinstance(body, dict) else None,
            retry_after=retry_after,
        )

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()
