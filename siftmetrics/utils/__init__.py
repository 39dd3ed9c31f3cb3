"""siftmetrics utilities package."""

from siftmetrics.utils.logging_utils import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
