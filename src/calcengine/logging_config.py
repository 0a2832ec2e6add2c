"""
Logging setup for applications embedding the engine. The library itself
only creates module loggers and never configures handlers on import.
"""
import logging
import sys

from calcengine.config import get_settings


class StructuredFormatter(logging.Formatter):
    """Format as time | level | logger | message | optional extras."""

    EXTRA_KEYS = ("operation", "operands", "result", "error_kind")

    def format(self, record: logging.LogRecord) -> str:
        parts = [
            self.formatTime(record, self.datefmt),
            record.levelname,
            record.name,
            record.getMessage(),
        ]
        # LogRecord stores extra keys as attributes
        for key in self.EXTRA_KEYS:
            if hasattr(record, key):
                parts.append(f"{key}={getattr(record, key)}")
        return " | ".join(str(p) for p in parts)


def configure_logging(level: str | None = None) -> None:
    """Configure the calcengine logger. Idempotent."""
    if level is None:
        level = get_settings().log_level
    level_value = getattr(logging, level.upper(), logging.WARNING)
    logger = logging.getLogger("calcengine")
    logger.setLevel(level_value)
    if logger.handlers:
        for h in logger.handlers:
            h.setFormatter(StructuredFormatter())
            h.setLevel(level_value)
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(StructuredFormatter())
    handler.setLevel(level_value)
    logger.addHandler(handler)
