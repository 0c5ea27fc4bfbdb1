"""Diagnostics sinks for provider events.

Providers report notable events (failed sends, unrecognized statuses,
unsupported operations) as four fields: provider name, event type, the
message id involved (or ``""``) and free-text details. Where those events
end up is the caller's choice; the default writes them to ``logging``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

logger = logging.getLogger(__name__)


class DiagnosticsSink(Protocol):
    """Interface that receives provider warnings and errors."""

    def warning(self, provider: str, event_type: str, message_id: str, details: str) -> None:
        ...

    def error(self, provider: str, event_type: str, message_id: str, details: str) -> None:
        ...


class LoggingDiagnostics:
    """Writes provider events to the ``sms_bridge.diagnostics`` logger."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def warning(self, provider: str, event_type: str, message_id: str, details: str) -> None:
        self._emit(logging.WARNING, provider, event_type, message_id, details)

    def error(self, provider: str, event_type: str, message_id: str, details: str) -> None:
        self._emit(logging.ERROR, provider, event_type, message_id, details)

    def _emit(self, level: int, provider: str, event_type: str, message_id: str, details: str) -> None:
        self._log.log(
            level,
            "[%s] %s message_id=%s: %s",
            provider,
            event_type,
            message_id or "-",
            details,
            extra={
                "sms_provider": provider,
                "sms_event": event_type,
                "sms_message_id": message_id,
                "sms_details": details,
            },
        )


@dataclass(frozen=True, slots=True)
class DiagnosticRecord:
    """A single event captured by ``RecordingDiagnostics``."""

    level: int
    provider: str
    event_type: str
    message_id: str
    details: str


@dataclass
class RecordingDiagnostics:
    """Keeps every event in memory.

    Usage::

        diagnostics = RecordingDiagnostics()
        provider = ETxtSMSProvider(config, diagnostics=diagnostics)
        ...
        assert diagnostics.events_of("UnknownStatus")
    """

    records: list[DiagnosticRecord] = field(default_factory=list)

    def warning(self, provider: str, event_type: str, message_id: str, details: str) -> None:
        self.records.append(DiagnosticRecord(logging.WARNING, provider, event_type, message_id, details))

    def error(self, provider: str, event_type: str, message_id: str, details: str) -> None:
        self.records.append(DiagnosticRecord(logging.ERROR, provider, event_type, message_id, details))

    def events_of(self, event_type: str) -> list[DiagnosticRecord]:
        return [r for r in self.records if r.event_type == event_type]

    def clear(self) -> None:
        self.records.clear()
