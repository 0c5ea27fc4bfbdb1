"""Provider selection from configuration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .mock import MockSMSProvider
from .providers.etxt import ETxtSMSProvider
from .types import ETxtConfig, MockSMSConfig

if TYPE_CHECKING:
    from .diagnostics import DiagnosticsSink
    from .providers.base import SMSProvider
    from .types import SMSProviderConfig

logger = logging.getLogger(__name__)


def create_sms_provider(
    config: SMSProviderConfig,
    *,
    diagnostics: DiagnosticsSink | None = None,
) -> SMSProvider:
    """Build the SMS provider matching the given configuration.

    Call once at startup and share the returned provider; gateway providers
    hold a pooled HTTP client.

    Raises:
        TypeError: If the configuration type has no provider.
    """
    if isinstance(config, ETxtConfig):
        logger.info("Using eTXT SMS provider at %s", config.base_url)
        return ETxtSMSProvider(config, diagnostics=diagnostics)
    if isinstance(config, MockSMSConfig):
        logger.info("Using mock SMS provider")
        return MockSMSProvider(failure_rate=config.failure_rate, fixed_status=config.fixed_status)
    raise TypeError(f"Unsupported SMS provider config: {type(config).__name__}")
