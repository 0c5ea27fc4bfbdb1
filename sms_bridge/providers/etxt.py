"""eTXT SMS gateway provider."""

from __future__ import annotations

import json
import logging
import uuid
from typing import Any

import httpx

from sms_bridge.diagnostics import DiagnosticsSink, LoggingDiagnostics
from sms_bridge.types import (
    EMPTY_MESSAGE_ID,
    TRANSPORT_FAILURE_STATUS,
    UPSTREAM_REJECTED_STATUS,
    DeleteMessageResult,
    DeliveryResult,
    ETxtConfig,
    MessageStatusRecord,
    ReceivedSMS,
    SMSMessage,
    SmsStatus,
)

from .transport import create_client

logger = logging.getLogger(__name__)

PROVIDER_NAME = "eTXT"
MESSAGES_PATH = "v1/messages"

# Gateway status vocabulary. "expired" is known but says nothing about delivery.
_STATUS_MAP: dict[str, SmsStatus] = {
    "submitted": SmsStatus.PENDING,
    "enroute": SmsStatus.PENDING,
    "rejected": SmsStatus.FAILED,
    "failed": SmsStatus.FAILED,
    "delivered": SmsStatus.DELIVERED,
    "expired": SmsStatus.UNKNOWN,
}

_MAX_DETAIL_CHARS = 500


def _preview(text: str) -> str:
    if len(text) > _MAX_DETAIL_CHARS:
        return text[:_MAX_DETAIL_CHARS] + "..."
    return text


def _id_text(message_id: uuid.UUID) -> str:
    return "" if message_id == EMPTY_MESSAGE_ID else str(message_id)


def _load_json(body: bytes) -> Any | None:
    """Decode a response body, or None when it is empty or not JSON."""
    if not body:
        return None
    # Deeply nested bodies exhaust the decoder's recursion limit.
    try:
        return json.loads(body)
    except (ValueError, RecursionError):
        return None


def parse_message_id(body: bytes) -> uuid.UUID | None:
    """Extract the gateway-assigned id from a submission response.

    Expects ``{"messages": [{"message_id": "<uuid>"}, ...]}``. When several
    messages come back the last one is used. Returns None if the body has no
    usable id.
    """
    data = _load_json(body)
    if not isinstance(data, dict):
        return None
    messages = data.get("messages")
    if not isinstance(messages, list) or not messages:
        return None
    last = messages[-1]
    if not isinstance(last, dict):
        return None
    raw_id = last.get("message_id")
    if not isinstance(raw_id, str):
        return None
    try:
        return uuid.UUID(raw_id)
    except ValueError:
        return None


def parse_gateway_status(body: bytes) -> str | None:
    """Extract the ``status`` string from a status response, if present."""
    data = _load_json(body)
    if not isinstance(data, dict):
        return None
    status = data.get("status")
    return status if isinstance(status, str) else None


def map_gateway_status(gateway_status: str | None) -> SmsStatus | None:
    """Map an eTXT status to the normalized vocabulary.

    Matching is exact. Returns None for values outside the gateway's
    documented vocabulary, including differently cased ones.
    """
    if gateway_status is None:
        return None
    return _STATUS_MAP.get(gateway_status)


class ETxtSMSProvider:
    """Sends SMS messages and polls their status via the eTXT REST API.

    Inbound messages are not supported by this gateway integration; the
    receive, delete and recent-status operations return empty results.

    A single ``httpx.AsyncClient`` carrying the credentials is created up
    front and shared by every call, so concurrent sends and polls reuse its
    connection pool.
    """

    def __init__(
        self,
        config: ETxtConfig,
        *,
        diagnostics: DiagnosticsSink | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not config.api_key:
            raise ValueError("ETxtConfig.api_key is required")
        if not config.api_secret:
            raise ValueError("ETxtConfig.api_secret is required")
        self._config = config
        self._diagnostics = diagnostics if diagnostics is not None else LoggingDiagnostics()
        self._client = create_client(
            config.base_url,
            config.api_key,
            config.api_secret,
            timeout=config.timeout_seconds,
            transport=transport,
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> ETxtSMSProvider:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    # ── Send ──────────────────────────────────────────────────────

    async def send(self, message: SMSMessage) -> tuple[DeliveryResult, uuid.UUID]:
        """Submit one SMS to eTXT.

        The id is recovered from the response body whatever the HTTP status;
        ``EMPTY_MESSAGE_ID`` is returned when it cannot be.
        """
        # httpx JSON-encodes the payload, escaping quotes, backslashes and control characters.
        payload = {
            "messages": [
                {
                    "content": message.body,
                    "destination_number": message.to,
                }
            ]
        }
        try:
            response = await self._client.post(MESSAGES_PATH, json=payload)
        except httpx.HTTPError as exc:
            detail = str(exc) or type(exc).__name__
            self._diagnostics.error(PROVIDER_NAME, "SendFailed", "", f"No response from eTXT: {detail}")
            return DeliveryResult.fail(detail, status_code=TRANSPORT_FAILURE_STATUS), EMPTY_MESSAGE_ID

        message_id = parse_message_id(response.content)
        if message_id is None:
            self._diagnostics.warning(
                PROVIDER_NAME,
                "MessageIdMissing",
                "",
                f"No message_id in eTXT response (HTTP {response.status_code}): {_preview(response.text)}",
            )
            message_id = EMPTY_MESSAGE_ID

        return self._result_from_response(response, message_id), message_id

    def _result_from_response(self, response: httpx.Response, message_id: uuid.UUID) -> DeliveryResult:
        if response.is_success:
            logger.info("SMS submitted via eTXT, message_id=%s", message_id)
            return DeliveryResult.ok(status_code=response.status_code)

        status_line = f"HTTP {response.status_code} {response.reason_phrase}"
        self._diagnostics.error(
            PROVIDER_NAME, "SendFailed", _id_text(message_id), f"{status_line}: {_preview(response.text)}"
        )
        return DeliveryResult.fail(f"{status_line}: {response.text}", status_code=UPSTREAM_REJECTED_STATUS)

    # ── Status ────────────────────────────────────────────────────

    async def fetch_status(self, message_id: uuid.UUID) -> SmsStatus:
        """Ask eTXT for the current status of a sent message.

        Transport errors and HTTP errors both come back as ``TIMED_OUT``: the
        status endpoint is slow to resolve and such failures are usually
        transient. A successful response with an unrecognized status is
        ``UNKNOWN`` and reported at error level.
        """
        if message_id == EMPTY_MESSAGE_ID:
            self._diagnostics.error(
                PROVIDER_NAME, "InvalidMessageId", "", "Status check requested for the empty message id"
            )
            return SmsStatus.UNKNOWN

        id_text = str(message_id)
        try:
            response = await self._client.get(f"{MESSAGES_PATH}/{id_text}")
        except httpx.HTTPError as exc:
            self._diagnostics.warning(
                PROVIDER_NAME,
                "StatusRequestFailed",
                id_text,
                f"No response from eTXT: {str(exc) or type(exc).__name__}",
            )
            return SmsStatus.TIMED_OUT

        if not response.is_success:
            self._diagnostics.warning(
                PROVIDER_NAME,
                "StatusHttpError",
                id_text,
                f"HTTP {response.status_code} {response.reason_phrase}: {_preview(response.text)}",
            )
            return SmsStatus.TIMED_OUT

        gateway_status = parse_gateway_status(response.content)
        status = map_gateway_status(gateway_status)
        if status is None:
            self._diagnostics.error(
                PROVIDER_NAME,
                "UnknownStatus",
                id_text,
                f"Unrecognized eTXT status: {gateway_status!r}",
            )
            return SmsStatus.UNKNOWN

        logger.debug("eTXT status for %s: %s -> %s", id_text, gateway_status, status.value)
        return status

    # ── Not supported by this gateway ─────────────────────────────

    async def fetch_received_messages(self) -> list[ReceivedSMS]:
        self._not_implemented("Receive Messages", "")
        return []

    async def delete_received_message(self, message_id: uuid.UUID) -> DeleteMessageResult:
        self._not_implemented("Delete Message", str(message_id))
        return DeleteMessageResult(
            message_id=str(message_id),
            deleted=False,
            feedback="Delete operation not implemented for eTXT provider",
        )

    async def fetch_recent_statuses(self) -> list[MessageStatusRecord]:
        self._not_implemented("Get Recent Statuses", "")
        return []

    def _not_implemented(self, operation: str, message_id: str) -> None:
        self._diagnostics.warning(
            PROVIDER_NAME,
            "NotImplemented",
            message_id,
            f"{operation} attempted but not implemented for eTXT provider",
        )
