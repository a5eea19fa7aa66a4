"""
Cloth Color Structured Logging
Centralized logging configuration using loguru.
"""
import sys
from typing import Dict, Any, Optional

from loguru import logger

from clothcolor.config import config


def configure_logging(level: Optional[str] = None, serialize: bool = False) -> None:
    """Replace loguru's default handler with the engine's structured format."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {name} | {message} | {extra}",
        level=level or config.LOG_LEVEL,
        serialize=serialize,
    )


class StructuredLogger:
    """Structured logger for color classification calls."""

    def __init__(self, component: str):
        self.component = component

    def _bound(self, extra: Optional[Dict[str, Any]]):
        return logger.bind(component=self.component, **(extra or {}))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log info message with optional extra data."""
        self._bound(extra).info(message)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log debug message with optional extra data."""
        self._bound(extra).debug(message)


_loggers: Dict[str, StructuredLogger] = {}


def get_logger(component: str = "clothcolor") -> StructuredLogger:
    """Get or create the structured logger for a component."""
    if component not in _loggers:
        _loggers[component] = StructuredLogger(component)
    return _loggers[component]
