"""Mock SMS provider for testing.

Records all sent messages and returns configurable results.
Useful for unit testing code that depends on SMS delivery without
hitting a real gateway.
"""

from __future__ import annotations

import random
import uuid
from dataclasses import dataclass

from .types import (
    EMPTY_MESSAGE_ID,
    DeleteMessageResult,
    DeliveryResult,
    MessageStatusRecord,
    ReceivedSMS,
    SMSMessage,
    SmsStatus,
)


@dataclass
class SentSMS:
    """Record of a message sent through the MockSMSProvider."""

    message: SMSMessage
    result: DeliveryResult
    message_id: uuid.UUID


class MockSMSProvider:
    """Test provider that records messages and returns configurable results.

    Usage::

        provider = MockSMSProvider()
        result, message_id = await provider.send(SMSMessage(to="+6421...", body="hi"))
        assert result.succeeded
        assert len(provider.sent) == 1
        assert await provider.fetch_status(message_id) == SmsStatus.PENDING

    Configure failures::

        provider = MockSMSProvider(failure_rate=0.5)
        # ~50% of sends will be rejected with no message id

    Or provide a fixed result::

        provider = MockSMSProvider(fixed_result=DeliveryResult.fail("quota exceeded"))
    """

    def __init__(
        self,
        *,
        failure_rate: float = 0.0,
        fixed_result: DeliveryResult | None = None,
        fixed_status: SmsStatus = SmsStatus.PENDING,
    ) -> None:
        self.failure_rate = failure_rate
        self.fixed_result = fixed_result
        self.fixed_status = fixed_status
        self.sent: list[SentSMS] = []

    async def send(self, message: SMSMessage) -> tuple[DeliveryResult, uuid.UUID]:
        if self.fixed_result is not None:
            result = self.fixed_result
        elif self.failure_rate > 0 and random.random() < self.failure_rate:  # noqa: S311
            result = DeliveryResult.fail("Simulated failure")
        else:
            result = DeliveryResult.ok()

        message_id = uuid.uuid4() if result.succeeded else EMPTY_MESSAGE_ID
        self.sent.append(SentSMS(message=message, result=result, message_id=message_id))
        return result, message_id

    async def fetch_status(self, message_id: uuid.UUID) -> SmsStatus:
        if message_id == EMPTY_MESSAGE_ID:
            return SmsStatus.UNKNOWN
        if any(record.message_id == message_id for record in self.sent):
            return self.fixed_status
        return SmsStatus.UNKNOWN

    async def fetch_received_messages(self) -> list[ReceivedSMS]:
        return []

    async def delete_received_message(self, message_id: uuid.UUID) -> DeleteMessageResult:
        return DeleteMessageResult(
            message_id=str(message_id),
            deleted=False,
            feedback="Mock provider holds no received messages",
        )

    async def fetch_recent_statuses(self) -> list[MessageStatusRecord]:
        return []

    def reset(self) -> None:
        """Clear all recorded messages."""
        self.sent.clear()
