"""Tests for logging setup."""

import json
import logging

from rich.logging import RichHandler

from wordbatch.log import JsonFormatter, setup_logging


def _wordbatch_logger():
    return logging.getLogger("wordbatch")


class TestSetupLogging:
    def test_text_uses_rich_handler(self):
        setup_logging("info", "text")
        handlers = _wordbatch_logger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], RichHandler)
        assert _wordbatch_logger().level == logging.INFO

    def test_json_format(self):
        setup_logging("debug", "json")
        handler = _wordbatch_logger().handlers[0]
        assert isinstance(handler.formatter, JsonFormatter)
        assert _wordbatch_logger().level == logging.DEBUG

    def test_quiet_raises_threshold(self):
        setup_logging("debug", "text", quiet=True)
        assert _wordbatch_logger().level == logging.WARNING

    def test_quiet_keeps_higher_level(self):
        setup_logging("error", "text", quiet=True)
        assert _wordbatch_logger().level == logging.ERROR

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logging("info", "text")
        setup_logging("info", "json")
        assert len(_wordbatch_logger().handlers) == 1


class TestJsonFormatter:
    def test_record_fields(self):
        record = logging.LogRecord(
            "wordbatch.converter", logging.WARNING, __file__, 1,
            "failed to convert %s", ("a.doc",), None,
        )
        payload = json.loads(JsonFormatter().format(record))
        assert payload["level"] == "warning"
        assert payload["logger"] == "wordbatch.converter"
        assert payload["message"] == "failed to convert a.doc"
        assert "ts" in payload
