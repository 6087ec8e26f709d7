"""Unit tests for structured logging."""

import json
import logging

from storybot.logging import JSONFormatter, StoryLogger, configure_logging


def make_record(**extra):
    record = logging.LogRecord("story_generation", logging.INFO, __file__, 1, "hello", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Tests for JSON log lines."""

    def test_base_fields(self):
        data = json.loads(JSONFormatter().format(make_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "story_generation"
        assert data["message"] == "hello"
        assert data["timestamp"].endswith("Z")

    def test_structured_extras(self):
        data = json.loads(
            JSONFormatter().format(make_record(user_id=5, stage="text", step="TOPIC", duration=1.5))
        )

        assert data["user_id"] == 5
        assert data["stage"] == "text"
        assert data["step"] == "TOPIC"
        assert data["duration"] == 1.5

    def test_failure_and_start_extras(self):
        data = json.loads(
            JSONFormatter().format(make_record(failed_at_stage="image", child_count=2))
        )

        assert data["failed_at_stage"] == "image"
        assert data["child_count"] == 2


class TestConfigureLogging:
    """Tests for root logger setup."""

    def test_replaces_root_handlers(self):
        root = logging.getLogger()
        saved = root.handlers[:]
        try:
            configure_logging(json_format=True, level=logging.DEBUG)

            assert len(root.handlers) == 1
            assert isinstance(root.handlers[0].formatter, JSONFormatter)
            assert logging.getLogger("httpx").level == logging.WARNING
        finally:
            root.handlers[:] = saved


class TestStoryLogger:
    """Tests for story generation event logging."""

    def test_generation_failed_logs_error_with_type(self, caplog):
        with caplog.at_level(logging.ERROR, logger="story_generation"):
            StoryLogger().generation_failed(9, ValueError("bad"), stage="image")

        record = caplog.records[-1]
        assert record.error_type == "ValueError"
        assert record.failed_at_stage == "image"
        assert record.user_id == 9
