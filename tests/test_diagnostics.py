"""Tests for diagnostics sinks."""

import logging

from sms_bridge import LoggingDiagnostics, RecordingDiagnostics


class TestLoggingDiagnostics:
    def test_warning_fields_in_record(self, caplog):
        sink = LoggingDiagnostics()
        with caplog.at_level(logging.WARNING, logger="sms_bridge.diagnostics"):
            sink.warning("eTXT", "NotImplemented", "", "Receive Messages attempted")

        [record] = caplog.records
        assert record.levelno == logging.WARNING
        assert record.sms_provider == "eTXT"
        assert record.sms_event == "NotImplemented"
        assert record.sms_message_id == ""
        assert "Receive Messages attempted" in record.getMessage()

    def test_error_level(self, caplog):
        sink = LoggingDiagnostics()
        with caplog.at_level(logging.WARNING, logger="sms_bridge.diagnostics"):
            sink.error("eTXT", "UnknownStatus", "abc", "Unrecognized eTXT status: 'banana'")

        [record] = caplog.records
        assert record.levelno == logging.ERROR
        assert "abc" in record.getMessage()

    def test_custom_logger(self, caplog):
        sink = LoggingDiagnostics(logging.getLogger("app.sms"))
        with caplog.at_level(logging.WARNING, logger="app.sms"):
            sink.warning("eTXT", "SendFailed", "", "boom")

        assert caplog.records[0].name == "app.sms"


class TestRecordingDiagnostics:
    def test_records_and_filters(self):
        sink = RecordingDiagnostics()
        sink.warning("eTXT", "NotImplemented", "", "a")
        sink.error("eTXT", "UnknownStatus", "id", "b")

        assert len(sink.records) == 2
        [record] = sink.events_of("UnknownStatus")
        assert record.level == logging.ERROR
        assert record.message_id == "id"

    def test_clear(self):
        sink = RecordingDiagnostics()
        sink.warning("eTXT", "NotImplemented", "", "a")
        sink.clear()
        assert sink.records == []
