"""Error hierarchy for the xAI provider."""
from __future__ import annotations

from typing import Any


class XAIError(Exception):
    """Base error for all xai_provider errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ProviderError(XAIError):
    """Error returned by the xAI API."""

    def __init__(
        self,
        message: str,
        *,
        provider: str = "",
        status_code: int | None = None,
        error_code: str | None = None,
        retryable: bool = False,
        retry_after: float | None = None,
        raw: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.provider = provider
        self.status_code = status_code
        self.error_code = error_code
        self.retryable = retryable
        self.retry_after = retry_after
        self.raw = raw


# ---------------------------------------------------------------------------
# Status-specific provider errors
# ---------------------------------------------------------------------------


class AuthenticationError(ProviderError):
    """The API key was missing or rejected."""


class AccessDeniedError(ProviderError):
    """The key is valid but lacks permission."""


class NotFoundError(ProviderError):
    """Resource not found (e.g. a model that is not deployed)."""


class InvalidRequestError(ProviderError):
    """The request was malformed or invalid."""


class ContextLengthError(ProviderError):
    """Input exceeded the model's context window."""


class RateLimitError(ProviderError):
    """Rate limit exceeded."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("retryable", True)
        super().__init__(message, **kwargs)


class ServerError(ProviderError):
    """Server-side failure."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("retryable", True)
        super().__init__(message, **kwargs)


# ---------------------------------------------------------------------------
# Non-provider errors
# ---------------------------------------------------------------------------


class RequestTimeoutError(XAIError):
    """A request timed out."""


class NetworkError(XAIError):
    """A network-level error occurred."""


class StreamError(XAIError):
    """An error event arrived while streaming."""


class ConfigurationError(XAIError):
    """Required configuration is missing or invalid."""


_STATUS_ERRORS: dict[int, type[ProviderError]] = {
    400: InvalidRequestError,
    401: AuthenticationError,
    403: AccessDeniedError,
    404: NotFoundError,
    413: ContextLengthError,
    422: InvalidRequestError,
    429: RateLimitError,
}


def error_from_status_code(
    status_code: int,
    message: str,
    *,
    provider: str = "",
    error_code: str | None = None,
    raw: dict[str, Any] | None = None,
    retry_after: float | None = None,
) -> ProviderError:
    """Map an HTTP status code to the matching error type."""
    common: dict[str, Any] = dict(
        provider=provider,
        status_code=status_code,
        error_code=error_code,
        raw=raw,
        retry_after=retry_after,
    )
    error_cls = _STATUS_ERRORS.get(status_code)
    if error_cls is not None:
        return error_cls(message, **common)
    if 500 <= status_code <= 599:
        return ServerError(message, **common)
    # Anything else (408, unexpected 3xx/4xx) is worth retrying.
    return ProviderError(message, retryable=True, **common)
