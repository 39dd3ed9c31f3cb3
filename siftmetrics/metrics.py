"""Distance and similarity metrics for siftmetrics.

Three metrics of increasing cost and accuracy:

- length: difference in length only, O(1)
- sift: bounded-lookahead approximation, O(max_offset * n)
- levenshtein: exact edit distance, O(n * m) time and space

plus two cascades, fast_distance and fast_similarity, that evaluate the
metrics cheapest first and stop as soon as a result already settles the
threshold. Pure functions; no I/O.

Length metrics, sift_distance and both cascades accept None and treat it as
an empty sequence. sift_similarity and the Levenshtein functions raise
TypeError on None.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from config.defaults import MATCH_MIN_SIMILARITY, NEAR_DUPLICATE_THRESHOLD
from siftmetrics.models import (
    STAGE_LENGTH,
    STAGE_LEVENSHTEIN,
    STAGE_SIFT,
    CascadeResult,
    SequenceLike,
)
from siftmetrics.sift import SiftMetric

if TYPE_CHECKING:
    from config.settings import MetricConfig

logger = logging.getLogger(__name__)

# Shared, immutable; used whenever a caller does not pass its own SiftMetric
DEFAULT_SIFT = SiftMetric()


def _require(value: Optional[SequenceLike], name: str) -> SequenceLike:
    if value is None:
        raise TypeError(f"{name} must be a sequence, got None")
    return value


# ── Length ─────────────────────────────────────────────────────────────────────

def length_distance(s1: Optional[SequenceLike], s2: Optional[SequenceLike]) -> int:
    """Absolute difference in length. None counts as length 0."""
    return abs(len(s1 or ()) - len(s2 or ()))


def length_similarity(s1: Optional[SequenceLike], s2: Optional[SequenceLike]) -> float:
    """Ratio of the shorter length to the longer one.

    Two empty sequences are fully similar (1.0); an empty sequence against a
    non-empty one scores 0.0. None counts as length 0.
    """
    l1 = len(s1 or ())
    l2 = len(s2 or ())
    if l1 < l2:
        return l1 / l2
    if l1 == 0:
        return 1.0
    return l2 / l1


# ── Sift ───────────────────────────────────────────────────────────────────────

def sift_distance(
    s1: Optional[SequenceLike],
    s2: Optional[SequenceLike],
    sift: Optional[SiftMetric] = None,
) -> float:
    """Sift approximate edit distance. None counts as empty.

    Args:
        s1: First sequence.
        s2: Second sequence.
        sift: SiftMetric to use (default: DEFAULT_SIFT, max_offset=5).
    """
    return (sift or DEFAULT_SIFT).distance(s1, s2)


def sift_similarity(
    s1: SequenceLike,
    s2: SequenceLike,
    sift: Optional[SiftMetric] = None,
) -> float:
    """Sift similarity. Raises TypeError if either sequence is None."""
    return (sift or DEFAULT_SIFT).similarity(s1, s2)


# ── Levenshtein ────────────────────────────────────────────────────────────────

def levenshtein_distance(s1: SequenceLike, s2: SequenceLike) -> int:
    """Compute the exact Levenshtein edit distance between two sequences.

    Classic dynamic programming over a full (n+1) x (m+1) table; insertion,
    deletion and substitution each cost 1.

    Args:
        s1: First sequence.
        s2: Second sequence.

    Returns:
        Minimum number of single-element edits turning s1 into s2.

    Raises:
        TypeError: If either sequence is None.
    """
    _require(s1, "s1")
    _require(s2, "s2")
    n, m = len(s1), len(s2)
    if n == 0:
        return m
    if m == 0:
        return n

    distance: List[List[int]] = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n + 1):
        distance[i][0] = i
    for j in range(m + 1):
        distance[0][j] = j

    for i in range(1, n + 1):
        row, prev = distance[i], distance[i - 1]
        a = s1[i - 1]
        for j in range(1, m + 1):
            cost = 0 if a == s2[j - 1] else 1
            row[j] = min(prev[j] + 1, row[j - 1] + 1, prev[j - 1] + cost)
    return distance[n][m]


def levenshtein_similarity(s1: SequenceLike, s2: SequenceLike) -> float:
    """Levenshtein similarity in [0.0, 1.0], 1.0 for identical sequences.

    Raises:
        TypeError: If either sequence is None.
    """
    dist = levenshtein_distance(s1, s2)
    max_len = max(len(s1), len(s2))
    if max_len == 0:
        return 1.0
    return 1.0 - dist / max_len


# ── Cascades ───────────────────────────────────────────────────────────────────

def cascade_distance(
    s1: Optional[SequenceLike],
    s2: Optional[SequenceLike],
    max_distance: float,
    sift: Optional[SiftMetric] = None,
) -> CascadeResult:
    """Distance cascade: length, then Sift, then Levenshtein.

    Each stage returns immediately when its distance is already at or above
    max_distance. Only pairs that pass both cheap stages pay for the exact
    computation.

    Args:
        s1: First sequence (None counts as empty).
        s2: Second sequence (None counts as empty).
        max_distance: Distance at or above which a pair is rejected.
        sift: SiftMetric for the middle stage (default: DEFAULT_SIFT).

    Returns:
        CascadeResult with the distance and the stage that produced it.
    """
    s1 = s1 if s1 is not None else ""
    s2 = s2 if s2 is not None else ""

    ld = length_distance(s1, s2)
    if ld >= max_distance:
        logger.debug("Distance cascade: length stage rejected (%d >= %s)", ld, max_distance)
        return CascadeResult(value=float(ld), stage=STAGE_LENGTH)

    sd = sift_distance(s1, s2, sift)
    if sd >= max_distance:
        logger.debug("Distance cascade: sift stage rejected (%.2f >= %s)", sd, max_distance)
        return CascadeResult(value=sd, stage=STAGE_SIFT)

    return CascadeResult(value=float(levenshtein_distance(s1, s2)), stage=STAGE_LEVENSHTEIN)


def cascade_similarity(
    s1: Optional[SequenceLike],
    s2: Optional[SequenceLike],
    min_similarity: float,
    sift: Optional[SiftMetric] = None,
) -> CascadeResult:
    """Similarity cascade: length, then Sift, then Levenshtein.

    Each stage returns immediately when its similarity is already at or below
    min_similarity.

    Args:
        s1: First sequence (None counts as empty).
        s2: Second sequence (None counts as empty).
        min_similarity: Similarity at or below which a pair is rejected.
        sift: SiftMetric for the middle stage (default: DEFAULT_SIFT).

    Returns:
        CascadeResult with the similarity and the stage that produced it.
    """
    s1 = s1 if s1 is not None else ""
    s2 = s2 if s2 is not None else ""

    ls = length_similarity(s1, s2)
    if ls <= min_similarity:
        logger.debug("Similarity cascade: length stage rejected (%.3f <= %s)", ls, min_similarity)
        return CascadeResult(value=ls, stage=STAGE_LENGTH)

    ss = sift_similarity(s1, s2, sift)
    if ss <= min_similarity:
        logger.debug("Similarity cascade: sift stage rejected (%.3f <= %s)", ss, min_similarity)
        return CascadeResult(value=ss, stage=STAGE_SIFT)

    return CascadeResult(value=levenshtein_similarity(s1, s2), stage=STAGE_LEVENSHTEIN)


def fast_distance(
    s1: Optional[SequenceLike],
    s2: Optional[SequenceLike],
    max_distance: float,
    sift: Optional[SiftMetric] = None,
) -> float:
    """Distance via the length -> Sift -> Levenshtein cascade.

    Returns a value >= max_distance from the first stage that rejects the
    pair, otherwise the exact Levenshtein distance.
    """
    return cascade_distance(s1, s2, max_distance, sift).value


def fast_similarity(
    s1: Optional[SequenceLike],
    s2: Optional[SequenceLike],
    min_similarity: float,
    sift: Optional[SiftMetric] = None,
) -> float:
    """Similarity via the length -> Sift -> Levenshtein cascade.

    Returns a value <= min_similarity from the first stage that rejects the
    pair, otherwise the exact Levenshtein similarity.
    """
    return cascade_similarity(s1, s2, min_similarity, sift).value


# ── Suite ──────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class MetricSuite:
    """All metrics and cascades bound to one SiftMetric.

    Convenience for callers that configure the Sift stage once and pass the
    suite around instead of a sift= argument on every call. The two
    thresholds are the defaults the matching helpers fall back to when no
    explicit threshold is passed.
    """

    sift: SiftMetric = field(default_factory=SiftMetric)
    near_duplicate_threshold: float = NEAR_DUPLICATE_THRESHOLD
    match_min_similarity: float = MATCH_MIN_SIMILARITY

    def __post_init__(self) -> None:
        for name in ("near_duplicate_threshold", "match_min_similarity"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be in [0.0, 1.0], got {value}")

    @classmethod
    def from_config(cls, config: "MetricConfig") -> "MetricSuite":
        """Build a MetricSuite whose Sift stage and thresholds follow a MetricConfig."""
        return cls(
            sift=SiftMetric.from_config(config),
            near_duplicate_threshold=config.near_duplicate_threshold,
            match_min_similarity=config.match_min_similarity,
        )

    def length_distance(self, s1: Optional[SequenceLike], s2: Optional[SequenceLike]) -> int:
        return length_distance(s1, s2)

    def length_similarity(
        self, s1: Optional[SequenceLike], s2: Optional[SequenceLike]
    ) -> float:
        return length_similarity(s1, s2)

    def sift_distance(self, s1: Optional[SequenceLike], s2: Optional[SequenceLike]) -> float:
        return self.sift.distance(s1, s2)

    def sift_similarity(self, s1: SequenceLike, s2: SequenceLike) -> float:
        return self.sift.similarity(s1, s2)

    def levenshtein_distance(self, s1: SequenceLike, s2: SequenceLike) -> int:
        return levenshtein_distance(s1, s2)

    def levenshtein_similarity(self, s1: SequenceLike, s2: SequenceLike) -> float:
        return levenshtein_similarity(s1, s2)

    def cascade_distance(
        self, s1: Optional[SequenceLike], s2: Optional[SequenceLike], max_distance: float
    ) -> CascadeResult:
        return cascade_distance(s1, s2, max_distance, self.sift)

    def cascade_similarity(
        self, s1: Optional[SequenceLike], s2: Optional[SequenceLike], min_similarity: float
    ) -> CascadeResult:
        return cascade_similarity(s1, s2, min_similarity, self.sift)

    def fast_distance(
        self, s1: Optional[SequenceLike], s2: Optional[SequenceLike], max_distance: float
    ) -> float:
        return fast_distance(s1, s2, max_distance, self.sift)

    def fast_similarity(
        self, s1: Optional[SequenceLike], s2: Optional[SequenceLike], min_similarity: float
    ) -> float:
        return fast_similarity(s1, s2, min_similarity, self.sift)
