"""Shared test fixtures for the SMS bridge library."""

import pytest

from sms_bridge import ETxtConfig, RecordingDiagnostics


@pytest.fixture
def etxt_config() -> ETxtConfig:
    return ETxtConfig(
        api_key="test_key_123",
        api_secret="test_secret_456",
        base_url="https://etxt.test/",
    )


@pytest.fixture
def diagnostics() -> RecordingDiagnostics:
    return RecordingDiagnostics()
