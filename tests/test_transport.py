"""Tests for credential and client setup."""

import base64

from sms_bridge.providers.transport import DEFAULT_TIMEOUT_SECONDS, basic_auth_header, create_client


class TestBasicAuthHeader:
    def test_encodes_key_and_secret(self):
        header = basic_auth_header("key", "secret")
        assert header == "Basic a2V5OnNlY3JldA=="

    def test_non_ascii_credentials_use_utf8(self):
        header = basic_auth_header("ключ", "pässword")
        token = header.removeprefix("Basic ")
        assert base64.b64decode(token).decode("utf-8") == "ключ:pässword"

    def test_empty_credentials_do_not_fail(self):
        assert basic_auth_header("", "") == "Basic Og=="


class TestCreateClient:
    async def test_attaches_default_header_and_base_url(self):
        client = create_client("https://etxt.test/", "key", "secret")
        try:
            assert client.headers["Authorization"] == basic_auth_header("key", "secret")
            assert str(client.base_url) == "https://etxt.test/"
            assert client.timeout.read == DEFAULT_TIMEOUT_SECONDS
        finally:
            await client.aclose()

    async def test_custom_timeout(self):
        client = create_client("https://etxt.test/", "key", "secret", timeout=2.5)
        try:
            assert client.timeout.connect == 2.5
        finally:
            await client.aclose()
