"""Base protocol for SMS providers."""

from __future__ import annotations

import uuid
from typing import Protocol

from sms_bridge.types import DeleteMessageResult, DeliveryResult, MessageStatusRecord, ReceivedSMS, SMSMessage, SmsStatus


class SMSProvider(Protocol):
    """Interface that all SMS providers must implement.

    Every method resolves to a value; failures are reported through the
    returned outcome or status, never raised.
    """

    async def send(self, message: SMSMessage) -> tuple[DeliveryResult, uuid.UUID]:
        """Send an SMS.

        Returns the outcome and the correlation id used for later status
        polling. The id is ``EMPTY_MESSAGE_ID`` when none could be recovered.
        """
        ...

    async def fetch_status(self, message_id: uuid.UUID) -> SmsStatus:
        """Fetch current delivery status for a previously sent message."""
        ...

    async def fetch_received_messages(self) -> list[ReceivedSMS]:
        """Fetch inbound messages waiting at the provider."""
        ...

    async def delete_received_message(self, message_id: uuid.UUID) -> DeleteMessageResult:
        """Delete an inbound message from the provider."""
        ...

    async def fetch_recent_statuses(self) -> list[MessageStatusRecord]:
        """Fetch statuses of recently sent messages."""
        ...
