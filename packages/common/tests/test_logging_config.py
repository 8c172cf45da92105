"""Tests for structlog configuration."""

import json

import pytest
import structlog

from course_catalog_common import configure_logging, get_logger

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore the default structlog configuration after each test."""
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_output(self, capsys):
        """Test JSON format writes one JSON object per event to stderr."""
        configure_logging(level="INFO", fmt="json")

        get_logger("test").info("catalog_written", rows=3)

        line = capsys.readouterr().err.strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "catalog_written"
        assert event["rows"] == 3
        assert event["level"] == "info"
        assert "timestamp" in event

    def test_level_filtering(self, capsys):
        """Test events below the configured level are dropped."""
        configure_logging(level="WARNING", fmt="json")

        logger = get_logger("test")
        logger.info("hidden_event")
        logger.warning("shown_event")

        err = capsys.readouterr().err
        assert "hidden_event" not in err
        assert "shown_event" in err

    def test_console_output(self, capsys):
        """Test console format includes the event name and fields."""
        configure_logging(level="DEBUG", fmt="console")

        get_logger("test").debug("blocks_split", blocks=12)

        err = capsys.readouterr().err
        assert "blocks_split" in err
        assert "blocks=12" in err
