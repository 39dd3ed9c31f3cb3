"""Data models for siftmetrics.

Defines the SequenceLike input alias and CascadeResult, the value returned
by the cascading combinators together with the stage that produced it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

# Anything indexable and sized whose elements compare with ==: str in the
# common case, but token lists and tuples work as well.
SequenceLike = Sequence[Any]

STAGE_LENGTH = "length"
STAGE_SIFT = "sift"
STAGE_LEVENSHTEIN = "levenshtein"

CASCADE_STAGES = (STAGE_LENGTH, STAGE_SIFT, STAGE_LEVENSHTEIN)


@dataclass(frozen=True)
class CascadeResult:
    """Outcome of a distance or similarity cascade."""

    value: float
    stage: str

    def __post_init__(self) -> None:
        if self.stage not in CASCADE_STAGES:
            raise ValueError(
                f"stage must be one of {', '.join(CASCADE_STAGES)}, got {self.stage!r}"
            )

    @property
    def exact(self) -> bool:
        """True when the value came from the exact Levenshtein stage."""
        return self.stage == STAGE_LEVENSHTEIN
