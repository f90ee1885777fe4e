"""Configuration for the xAI provider."""
from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from xai_provider.errors import ConfigurationError

logger = logging.getLogger("xai_provider")


@dataclass(frozen=True)
class AdapterTimeout:
    """Timeout settings, in seconds, used by the HTTP transport."""

    connect: float = 5.0
    request: float = 120.0


@dataclass(frozen=True)
class XAIConfig:
    xai_api_key: str | None = field(default=None, repr=False)
    timeout: AdapterTimeout = field(default_factory=AdapterTimeout)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> XAIConfig:
        """Create a config from ``XAI_API_KEY`` and ``XAI_TIMEOUT``.

        A missing key is left as ``None``; call
        :func:`validate_configuration` to reject it.
        """
        env = os.environ if environ is None else environ
        timeout = AdapterTimeout()
        raw_timeout = (env.get("XAI_TIMEOUT") or "").strip()
        if raw_timeout:
            try:
                seconds = float(raw_timeout)
            except ValueError:
                seconds = 0.0
            if seconds > 0:
                timeout = AdapterTimeout(request=seconds)
            else:
                logger.warning(
                    "Invalid XAI_TIMEOUT=%r, using default=%.1fs",
                    raw_timeout,
                    timeout.request,
                )
        return cls(xai_api_key=env.get("XAI_API_KEY") or None, timeout=timeout)


def missing_configuration_keys(config: object, required_keys: Iterable[str]) -> list[str]:
    """Return the required keys that are absent or empty on *config*, sorted."""
    return sorted(key for key in required_keys if not getattr(config, key, None))


def validate_configuration(config: object, required_keys: Iterable[str]) -> None:
    """Ensure every key in *required_keys* is set on *config*.

    Raises:
        ConfigurationError: Naming every missing key.
    """
    missing = missing_configuration_keys(config, required_keys)
    if missing:
        raise ConfigurationError(
            f"Missing configuration: {', '.join(missing)}"
        )
