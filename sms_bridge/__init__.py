"""
sms-bridge — SMS gateway adapters with a provider-independent status model.

Lets a local messaging system send SMS and poll delivery status through an
external gateway. Each provider maps its own vocabulary onto a small set of
normalized statuses, so callers never deal with gateway-specific values.

Quick start — SMS via eTXT::

    from sms_bridge import EMPTY_MESSAGE_ID, ETxtConfig, SMSMessage, create_sms_provider

    provider = create_sms_provider(ETxtConfig(api_key="...", api_secret="..."))
    result, message_id = await provider.send(SMSMessage(to="+6421555123", body="Hello!"))
    if not result.succeeded:
        print(f"Rejected ({result.status_code}): {result.error_message}")
    elif message_id == EMPTY_MESSAGE_ID:
        print("Sent, but the gateway gave no id to track it with")
    else:
        status = await provider.fetch_status(message_id)

Diagnostics go to ``logging`` by default; pass any ``DiagnosticsSink`` to
route them elsewhere::

    diagnostics = RecordingDiagnostics()
    provider = create_sms_provider(config, diagnostics=diagnostics)

For testing::

    from sms_bridge import MockSMSProvider

    provider = MockSMSProvider()
    result, message_id = await provider.send(SMSMessage(to="+6421...", body="test"))
    assert result.succeeded
    assert len(provider.sent) == 1

Module overview
---------------
- ``types``         — Core dataclasses: SMSMessage, DeliveryResult, SmsStatus, configs
- ``diagnostics``   — DiagnosticsSink protocol, logging and recording sinks
- ``providers/``    — SMSProvider protocol, ETxtSMSProvider, transport setup
- ``mock``          — MockSMSProvider
- ``factory``       — create_sms_provider (provider selection by config)

What this library does NOT own (stays in the consuming app):
- Retry scheduling and queueing
- Failover between providers
- Persisting message ids and statuses
"""

from .diagnostics import DiagnosticRecord, DiagnosticsSink, LoggingDiagnostics, RecordingDiagnostics
from .factory import create_sms_provider
from .mock import MockSMSProvider
from .providers.base import SMSProvider
from .providers.etxt import ETxtSMSProvider
from .types import (
    EMPTY_MESSAGE_ID,
    TRANSPORT_FAILURE_STATUS,
    UPSTREAM_REJECTED_STATUS,
    DeleteMessageResult,
    DeliveryResult,
    ETxtConfig,
    MessageStatusRecord,
    MockSMSConfig,
    ReceivedSMS,
    SMSMessage,
    SMSProviderConfig,
    SmsStatus,
)

__all__ = [
    # Providers
    "SMSProvider",
    "ETxtSMSProvider",
    "MockSMSProvider",
    "create_sms_provider",
    # Diagnostics
    "DiagnosticRecord",
    "DiagnosticsSink",
    "LoggingDiagnostics",
    "RecordingDiagnostics",
    # Types
    "EMPTY_MESSAGE_ID",
    "TRANSPORT_FAILURE_STATUS",
    "UPSTREAM_REJECTED_STATUS",
    "DeleteMessageResult",
    "DeliveryResult",
    "MessageStatusRecord",
    "ReceivedSMS",
    "SMSMessage",
    "SmsStatus",
    # Config
    "ETxtConfig",
    "MockSMSConfig",
    "SMSProviderConfig",
]
