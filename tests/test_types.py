"""Tests for core types."""

import dataclasses
import uuid

import pytest

from sms_bridge import (
    EMPTY_MESSAGE_ID,
    UPSTREAM_REJECTED_STATUS,
    DeliveryResult,
    ETxtConfig,
    SMSMessage,
    SmsStatus,
)


class TestDeliveryResult:
    def test_ok_factory(self):
        result = DeliveryResult.ok()
        assert result.succeeded
        assert result.status_code == 200
        assert result.error_message is None

    def test_fail_factory_defaults_to_upstream_rejected(self):
        result = DeliveryResult.fail("HTTP 400 Bad Request: nope")
        assert not result.succeeded
        assert result.status_code == UPSTREAM_REJECTED_STATUS
        assert result.error_message == "HTTP 400 Bad Request: nope"

    def test_succeeded_for_various_codes(self):
        assert DeliveryResult(status_code=200).succeeded
        assert DeliveryResult(status_code=202).succeeded
        assert not DeliveryResult(status_code=501).succeeded
        assert not DeliveryResult(status_code=503).succeeded


class TestSmsStatus:
    def test_terminal_statuses(self):
        assert SmsStatus.DELIVERED.is_terminal
        assert SmsStatus.FAILED.is_terminal
        assert not SmsStatus.PENDING.is_terminal
        assert not SmsStatus.TIMED_OUT.is_terminal
        assert not SmsStatus.UNKNOWN.is_terminal

    def test_closed_vocabulary(self):
        assert {s.name for s in SmsStatus} == {"PENDING", "DELIVERED", "FAILED", "TIMED_OUT", "UNKNOWN"}


class TestEmptyMessageId:
    def test_is_nil_uuid(self):
        assert EMPTY_MESSAGE_ID == uuid.UUID("00000000-0000-0000-0000-000000000000")

    def test_differs_from_generated_ids(self):
        assert uuid.uuid4() != EMPTY_MESSAGE_ID


class TestMessageTypes:
    def test_sms_message_is_immutable(self):
        msg = SMSMessage(to="+6421555123", body="Hi")
        with pytest.raises(dataclasses.FrozenInstanceError):
            msg.body = "changed"  # type: ignore[misc]

    def test_etxt_config_defaults(self):
        config = ETxtConfig(api_key="k", api_secret="s")
        assert config.base_url == "http://api.etxtservice.co.nz/"
        assert config.timeout_seconds == 10.0
