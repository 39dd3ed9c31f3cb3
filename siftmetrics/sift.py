"""Sift approximate edit distance for siftmetrics.

A single forward scan with local resynchronization: on a mismatch the scan
looks up to max_offset - 1 positions ahead in either sequence for the
character it just failed to match, then continues along the shifted
diagonal. Linear in the input length, no dynamic-programming table.

The result is a heuristic. It is not a true metric (no triangle inequality)
and can disagree with Levenshtein on inputs with repeated near-miss
alignments.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from config.defaults import SIFT_FAST_MODE, SIFT_MAX_OFFSET
from siftmetrics.models import SequenceLike

if TYPE_CHECKING:
    from config.settings import MetricConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SiftMetric:
    """Approximate edit distance with a bounded resynchronization window.

    Instances are immutable and hold no per-call state, so one instance can
    be shared freely between threads.

    Attributes:
        max_offset: Search radius after a mismatch. Characters further apart
            than this are treated as substitutions rather than moves.
        fast_mode: Advance the cursor past half the current offsets on a
            mismatch. Faster on heavily shifted input, less reliable.
    """

    max_offset: int = SIFT_MAX_OFFSET
    fast_mode: bool = SIFT_FAST_MODE

    def __post_init__(self) -> None:
        if isinstance(self.max_offset, bool) or not isinstance(self.max_offset, int):
            raise ValueError(
                f"max_offset must be an int, got {type(self.max_offset).__name__}"
            )
        if self.max_offset < 1:
            raise ValueError(f"max_offset must be >= 1, got {self.max_offset}")

    @classmethod
    def from_config(cls, config: "MetricConfig") -> "SiftMetric":
        """Build a SiftMetric from a MetricConfig."""
        logger.debug(
            "SiftMetric from config: max_offset=%d fast_mode=%s",
            config.sift_max_offset,
            config.sift_fast_mode,
        )
        return cls(max_offset=config.sift_max_offset, fast_mode=config.sift_fast_mode)

    def distance(self, s1: Optional[SequenceLike], s2: Optional[SequenceLike]) -> float:
        """Approximate the edit distance between two sequences.

        None is treated as an empty sequence.

        Args:
            s1: First sequence.
            s2: Second sequence.

        Returns:
            Half the combined length (rounded down) minus the number of
            aligned matches.
        """
        if not s1:
            return float(len(s2)) if s2 else 0.0
        if not s2:
            return float(len(s1))

        n1, n2 = len(s1), len(s2)
        c = 0
        offset1 = 0
        offset2 = 0
        lcs = 0
        while c + offset1 < n1 and c + offset2 < n2:
            if s1[c + offset1] == s2[c + offset2]:
                lcs += 1
            else:
                if self.fast_mode:
                    c += (offset1 + offset2) // 2
                    if c >= n1:
                        c = n1 - 1
                    if c >= n2:
                        c = n2 - 1
                offset1 = 0
                offset2 = 0
                if s1[c] == s2[c]:
                    c += 1
                    continue
                for i in range(1, self.max_offset):
                    if c + i < n1 and s1[c + i] == s2[c]:
                        offset1 = i
                        break
                    if c + i < n2 and s1[c] == s2[c + i]:
                        offset2 = i
                        break
            c += 1

        return float((n1 + n2) // 2 - lcs)

    def similarity(self, s1: SequenceLike, s2: SequenceLike) -> float:
        """Sift similarity in [0.0, 1.0], 1.0 meaning identical.

        The normalizer is the larger of both lengths and the distance itself.
        The result is not clamped.

        Raises:
            TypeError: If either sequence is None.
        """
        if s1 is None or s2 is None:
            raise TypeError("sift similarity requires two sequences, got None")
        dist = self.distance(s1, s2)
        normalizer = max(len(s1), len(s2), dist)
        if normalizer == 0:
            return 1.0
        return 1.0 - dist / normalizer
