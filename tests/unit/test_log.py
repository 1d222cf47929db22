"""
Unit tests for logging configuration
"""
import json
import logging

import pytest

from core.log import configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Tests for configure_logging"""

    def test_json_output(self, restore_root_logger, capsys):
        """Test records are rendered as JSON lines"""
        configure_logging("info", "json")
        logging.getLogger("services.pod").info("pod created")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "pod created"
        assert record["level"] == "info"
        assert record["logger"] == "services.pod"
        assert "timestamp" in record

    def test_text_output(self, restore_root_logger, capsys):
        """Test text format is not JSON"""
        configure_logging("info", "text")
        logging.getLogger("main").info("server started")

        out = capsys.readouterr().out
        assert "server started" in out
        assert not out.strip().startswith("{")

    def test_level_filtering(self, restore_root_logger, capsys):
        """Test records below the level are dropped"""
        configure_logging("warn", "json")
        logger = logging.getLogger("core.kubernetes")
        logger.info("hidden")
        logger.warning("shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out
        assert restore_root_logger.level == logging.WARNING

    def test_single_handler(self, restore_root_logger):
        """Test repeated calls replace the handler"""
        first = configure_logging("info", "json")
        second = configure_logging("debug", "text")
        root = restore_root_logger
        assert first not in root.handlers
        assert second in root.handlers
        assert root.level == logging.DEBUG
