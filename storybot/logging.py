"""Structured logging infrastructure for the bot.

Provides JSON-formatted logging for production and human-readable
logging for development, plus a StoryLogger helper for story generation events.
"""

import json
import logging
import sys
from datetime import datetime, timezone


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add extra fields if present
        if hasattr(record, "user_id"):
            log_data["user_id"] = record.user_id
        if hasattr(record, "stage"):
            log_data["stage"] = record.stage
        if hasattr(record, "step"):
            log_data["step"] = record.step
        if hasattr(record, "duration"):
            log_data["duration"] = record.duration
        if hasattr(record, "error_type"):
            log_data["error_type"] = record.error_type
        if hasattr(record, "failed_at_stage"):
            log_data["failed_at_stage"] = record.failed_at_stage
        if hasattr(record, "child_count"):
            log_data["child_count"] = record.child_count

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def configure_logging(json_format: bool = True, level: int | str = logging.INFO) -> None:
    """Configure structured logging for the application."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Create console handler
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root_logger.addHandler(handler)

    # httpx logs every request at INFO, including the bot token in the URL
    logging.getLogger("httpx").setLevel(logging.WARNING)


class StoryLogger:
    """Logger for story generation events with structured fields."""

    def __init__(self):
        self.logger = logging.getLogger("story_generation")

    def generation_started(self, user_id: int, child_count: int) -> None:
        self.logger.info(
            "Story generation started",
            extra={"user_id": user_id, "stage": "started", "child_count": child_count},
        )

    def stage_completed(self, user_id: int, stage: str, duration: float = None) -> None:
        extra = {"user_id": user_id, "stage": stage}
        if duration:
            extra["duration"] = round(duration, 2)
        self.logger.info(f"Stage completed: {stage}", extra=extra)

    def generation_completed(self, user_id: int, duration: float) -> None:
        self.logger.info(
            "Story generation completed",
            extra={"user_id": user_id, "stage": "completed", "duration": round(duration, 2)},
        )

    def generation_failed(self, user_id: int, error: Exception, stage: str = None) -> None:
        extra = {"user_id": user_id, "stage": "failed", "error_type": type(error).__name__}
        if stage:
            extra["failed_at_stage"] = stage
        self.logger.error(f"Story generation failed: {error}", extra=extra, exc_info=error)


# Global story logger instance
story_logger = StoryLogger()
