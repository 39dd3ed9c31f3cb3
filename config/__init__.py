"""siftmetrics configuration package."""

from config.defaults import (
    DEFAULT_LOG_LEVEL,
    MATCH_MIN_SIMILARITY,
    NEAR_DUPLICATE_THRESHOLD,
    SIFT_FAST_MODE,
    SIFT_MAX_OFFSET,
)
from config.settings import MetricConfig

__all__ = [
    "MetricConfig",
    "SIFT_MAX_OFFSET",
    "SIFT_FAST_MODE",
    "NEAR_DUPLICATE_THRESHOLD",
    "MATCH_MIN_SIMILARITY",
    "DEFAULT_LOG_LEVEL",
]
