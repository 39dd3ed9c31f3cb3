"""siftmetrics — Cascading approximate string distance and similarity.

Public API surface:
    - length_*, sift_*, levenshtein_*: the three metrics
    - fast_distance / fast_similarity: cheapest-first cascades
    - SiftMetric, MetricSuite: configurable metric components
    - is_near_duplicate, best_match, find_matches: matching helpers
"""

__version__ = "1.0.0"
__author__ = "siftmetrics Contributors"

from config.settings import MetricConfig
from siftmetrics.matching import best_match, best_match_score, find_matches, is_near_duplicate
from siftmetrics.metrics import (
    MetricSuite,
    cascade_distance,
    cascade_similarity,
    fast_distance,
    fast_similarity,
    length_distance,
    length_similarity,
    levenshtein_distance,
    levenshtein_similarity,
    sift_distance,
    sift_similarity,
)
from siftmetrics.models import CascadeResult
from siftmetrics.sift import SiftMetric
from siftmetrics.utils.logging_utils import configure_logging, get_logger

__all__ = [
    "__version__",
    "MetricConfig",
    "SiftMetric",
    "MetricSuite",
    "CascadeResult",
    "length_distance",
    "length_similarity",
    "sift_distance",
    "sift_similarity",
    "levenshtein_distance",
    "levenshtein_similarity",
    "fast_distance",
    "fast_similarity",
    "cascade_distance",
    "cascade_similarity",
    "is_near_duplicate",
    "best_match",
    "best_match_score",
    "find_matches",
    "configure_logging",
    "get_logger",
]
