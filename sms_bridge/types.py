"""Core types for the SMS bridge library."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Union

# Nil UUID: "the gateway accepted the request but no id could be recovered".
EMPTY_MESSAGE_ID = uuid.UUID(int=0)

# Status code attached to a send the gateway refused, distinct from local errors.
UPSTREAM_REJECTED_STATUS = 501
# Status code attached to a send that never got a response.
TRANSPORT_FAILURE_STATUS = 503


class SmsStatus(str, Enum):
    """Provider-independent delivery status of a sent SMS."""

    PENDING = "pending"
    DELIVERED = "delivered"
    FAILED = "failed"
    TIMED_OUT = "timed_out"
    UNKNOWN = "unknown"

    @property
    def is_terminal(self) -> bool:
        """True when polling again cannot change the answer."""
        return self in {SmsStatus.DELIVERED, SmsStatus.FAILED}


@dataclass(frozen=True, slots=True)
class DeliveryResult:
    """Outcome of a single send attempt.

    Independent from the correlation id returned alongside it: a rejected
    send may still carry an id, and an accepted one may not.
    """

    status_code: int
    error_message: str | None = None

    @property
    def succeeded(self) -> bool:
        return 200 <= self.status_code < 300

    @classmethod
    def ok(cls, *, status_code: int = 200) -> DeliveryResult:
        return cls(status_code=status_code)

    @classmethod
    def fail(
        cls,
        error_message: str,
        *,
        status_code: int = UPSTREAM_REJECTED_STATUS,
    ) -> DeliveryResult:
        return cls(status_code=status_code, error_message=error_message)


# ── Messages ──────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class SMSMessage:
    """An outbound SMS. Both fields are passed to the gateway untouched."""

    to: str
    body: str


# ── Records for operations a provider may not support ─────────────────


@dataclass(frozen=True, slots=True)
class ReceivedSMS:
    """An inbound SMS retrieved from a provider."""

    message_id: uuid.UUID
    from_number: str
    body: str
    received_at: datetime


@dataclass(frozen=True, slots=True)
class DeleteMessageResult:
    """Result of deleting a received message from a provider."""

    message_id: str
    deleted: bool
    feedback: str


@dataclass(frozen=True, slots=True)
class MessageStatusRecord:
    """Last known status of a recently sent message."""

    message_id: uuid.UUID
    to: str
    status: SmsStatus
    sent_at: datetime
    status_updated_at: datetime | None = None


# ── Provider configuration ────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class ETxtConfig:
    """Configuration for creating an eTXT provider."""

    api_key: str
    api_secret: str
    base_url: str = "http://api.etxtservice.co.nz/"
    timeout_seconds: float = 10.0


@dataclass(frozen=True, slots=True)
class MockSMSConfig:
    """Configuration for creating a mock provider."""

    fixed_status: SmsStatus = SmsStatus.PENDING
    failure_rate: float = 0.0


SMSProviderConfig = Union[ETxtConfig, MockSMSConfig]
