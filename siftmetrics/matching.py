"""Fuzzy matching helpers for siftmetrics.

Near-duplicate checks and best-match lookups built on the similarity
cascade, so that candidates the length or Sift stage already rules out never
pay for an exact Levenshtein computation.

Sift can overestimate distance on heavily shifted input, so a candidate the
Sift stage rejects is not re-checked. These helpers trade that small recall
loss for speed on large candidate lists.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from siftmetrics.metrics import DEFAULT_SIFT, MetricSuite
from siftmetrics.models import SequenceLike

logger = logging.getLogger(__name__)

_DEFAULT_SUITE = MetricSuite(sift=DEFAULT_SIFT)


def is_near_duplicate(
    s1: Optional[SequenceLike],
    s2: Optional[SequenceLike],
    threshold: Optional[float] = None,
    suite: Optional[MetricSuite] = None,
) -> bool:
    """Check whether two sequences are near-duplicates.

    Args:
        s1: First sequence (None counts as empty).
        s2: Second sequence (None counts as empty).
        threshold: Levenshtein similarity at or above which the pair counts
            as a near-duplicate (default: suite.near_duplicate_threshold).
        suite: MetricSuite to score with (default: max_offset=5 Sift stage).

    Returns:
        True if the pair survives the cascade with similarity >= threshold.
    """
    suite = suite or _DEFAULT_SUITE
    if threshold is None:
        threshold = suite.near_duplicate_threshold
    s1 = s1 if s1 is not None else ""
    s2 = s2 if s2 is not None else ""
    result = suite.cascade_similarity(s1, s2, threshold)
    if result.exact or result.value < threshold:
        return result.value >= threshold
    # A cheap stage landed exactly on the threshold; only the exact score can decide
    return suite.levenshtein_similarity(s1, s2) >= threshold


def best_match(
    query: Optional[SequenceLike],
    candidates: Iterable[SequenceLike],
    suite: Optional[MetricSuite] = None,
) -> Optional[SequenceLike]:
    """Find the best-matching candidate for a query.

    The running best score is used as the cascade floor, so each later
    candidate is only scored exactly when it could still beat it. Ties keep
    the earlier candidate.

    Args:
        query: The sequence to match against.
        candidates: Candidate sequences.
        suite: MetricSuite to score with.

    Returns:
        The highest-scoring candidate, or None if candidates is empty.
    """
    match, _ = _best(query, candidates, suite or _DEFAULT_SUITE)
    return match


def best_match_score(
    query: Optional[SequenceLike],
    candidates: Iterable[SequenceLike],
    suite: Optional[MetricSuite] = None,
) -> float:
    """Similarity score of the best match, or 0.0 if candidates is empty."""
    _, score = _best(query, candidates, suite or _DEFAULT_SUITE)
    return score


def find_matches(
    query: Optional[SequenceLike],
    candidates: Iterable[SequenceLike],
    min_similarity: Optional[float] = None,
    suite: Optional[MetricSuite] = None,
) -> List[Tuple[SequenceLike, float]]:
    """Return every candidate whose similarity exceeds min_similarity.

    Args:
        query: The sequence to match against.
        candidates: Candidate sequences.
        min_similarity: Exclusive similarity floor (default:
            suite.match_min_similarity).
        suite: MetricSuite to score with.

    Returns:
        (candidate, levenshtein_similarity) pairs, highest score first;
        candidates with equal scores keep their input order.
    """
    suite = suite or _DEFAULT_SUITE
    if min_similarity is None:
        min_similarity = suite.match_min_similarity
    matches: List[Tuple[SequenceLike, float]] = []
    rejected = 0
    for candidate in candidates:
        result = suite.cascade_similarity(query, candidate, min_similarity)
        if result.value > min_similarity:
            matches.append((candidate, result.value))
        else:
            rejected += 1
    logger.debug(
        "find_matches: %d matched, %d rejected (min_similarity=%.2f)",
        len(matches),
        rejected,
        min_similarity,
    )
    return sorted(matches, key=lambda m: m[1], reverse=True)


def _best(
    query: Optional[SequenceLike],
    candidates: Iterable[SequenceLike],
    suite: MetricSuite,
) -> Tuple[Optional[SequenceLike], float]:
    best: Optional[SequenceLike] = None
    best_score = 0.0
    seen = False
    for candidate in candidates:
        if not seen:
            seen = True
            best = candidate
            best_score = suite.cascade_similarity(query, candidate, -1.0).value
            continue
        result = suite.cascade_similarity(query, candidate, best_score)
        if result.value > best_score:
            best, best_score = candidate, result.value
    return best, best_score
