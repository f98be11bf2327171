"""Unit tests for the auditor logging setup."""

import json
import logging
import sys
from pathlib import Path

from theme_auditor.audit_logging import (
    LOGGER_NAME,
    JSONFormatter,
    LogCategory,
    get_category_logger,
    get_logger,
    setup_logging,
)


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_default_setup(self, tmp_path: Path) -> None:
        """Test basic logging setup with a log file."""
        log_file = tmp_path / "audit.log"
        logger = setup_logging(log_file=log_file)

        logger.info("Test message")

        assert log_file.exists()
        assert "Test message" in log_file.read_text()

    def test_json_format(self, tmp_path: Path) -> None:
        log_file = tmp_path / "json.log"
        setup_logging(log_file=log_file, log_format="json")

        get_category_logger(LogCategory.ENGINE).info(
            "Rule finished", extra={"rule": "style-api-consistency", "result_count": 2}
        )

        entry = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert entry["message"] == "Rule finished"
        assert entry["level"] == "INFO"
        assert entry["logger"] == f"{LOGGER_NAME}.engine"
        assert entry["rule"] == "style-api-consistency"
        assert entry["result_count"] == 2

    def test_quiet_raises_console_level(self) -> None:
        logger = setup_logging(quiet=True)

        console = logger.handlers[0]
        assert console.level == logging.ERROR

    def test_verbose_lowers_console_level(self) -> None:
        logger = setup_logging(verbose=True)

        assert logger.handlers[0].level == logging.DEBUG


class TestLoggers:
    """Tests for logger accessors."""

    def test_get_logger(self) -> None:
        assert get_logger().name == LOGGER_NAME

    def test_category_loggers_are_children(self) -> None:
        logger = get_category_logger(LogCategory.EXTRACTOR)

        assert logger.name == "theme_auditor.extractor"
        assert logger.parent is logging.getLogger(LOGGER_NAME)


class TestJSONFormatter:
    """Tests for the JSON formatter."""

    def test_exception_included(self) -> None:
        try:
            raise ValueError("bad")
        except ValueError:
            record = logging.LogRecord(
                "theme_auditor", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
            )

        entry = json.loads(JSONFormatter().format(record))

        assert entry["message"] == "failed"
        assert "ValueError: bad" in entry["exception"]
