"""
Unit tests for structured logging setup.
"""

import json
import logging

from formrules.observability.logger import CustomJsonFormatter, setup_logger


class TestSetupLogger:
    """Tests for setup_logger"""

    def test_json_handler(self):
        logger = setup_logger("formrules", level="DEBUG", format_type="json")

        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, CustomJsonFormatter)

    def test_text_handler(self):
        logger = setup_logger("formrules", format_type="text")
        assert not isinstance(logger.handlers[0].formatter, CustomJsonFormatter)

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logger("formrules")
        logger = setup_logger("formrules")
        assert len(logger.handlers) == 1

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        logger = setup_logger("formrules")
        assert logger.level == logging.ERROR

    def test_unknown_level_falls_back_to_warning(self):
        logger = setup_logger("formrules", level="LOUD")
        assert logger.level == logging.WARNING


class TestCustomJsonFormatter:
    """Tests for CustomJsonFormatter"""

    def test_adds_context_fields(self):
        formatter = CustomJsonFormatter(
            fmt="%(timestamp)s %(level)s %(logger)s %(module)s %(function)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
        record = logging.LogRecord(
            name="formrules.core.validators.base_validator",
            level=logging.WARNING,
            pathname=__file__,
            lineno=1,
            msg="There is a type in field price that is unsupported",
            args=(),
            exc_info=None,
        )
        record.field_name = "price"

        payload = json.loads(formatter.format(record))

        assert payload["level"] == "WARNING"
        assert payload["logger"] == "formrules.core.validators.base_validator"
        assert payload["message"] == "There is a type in field price that is unsupported"
        assert payload["field_name"] == "price"
        assert payload["timestamp"]
