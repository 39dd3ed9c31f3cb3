"""siftmetrics — MetricConfig and environment-based configuration loading.

Runtime configuration flows through MetricConfig. Values come from keyword
arguments first, then SIFTMETRICS_* environment variables (a .env file is
honoured), then config.defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from config.defaults import (
    DEFAULT_LOG_LEVEL,
    MATCH_MIN_SIMILARITY,
    NEAR_DUPLICATE_THRESHOLD,
    SIFT_FAST_MODE,
    SIFT_MAX_OFFSET,
)

# Load .env file if present; silently skip if missing
load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass
class MetricConfig:
    """Single configuration object for building metric components.

    Pass one to SiftMetric.from_config or MetricSuite.from_config instead of
    threading individual tuneables through call sites.
    """

    # ── Sift approximation ─────────────────────────────────────────────────────
    sift_max_offset: int = field(
        default_factory=lambda: _env_int("SIFTMETRICS_MAX_OFFSET", SIFT_MAX_OFFSET)
    )
    sift_fast_mode: bool = field(
        default_factory=lambda: _env_bool("SIFTMETRICS_FAST_MODE", SIFT_FAST_MODE)
    )

    # ── Matching helpers ───────────────────────────────────────────────────────
    near_duplicate_threshold: float = field(
        default_factory=lambda: _env_float(
            "SIFTMETRICS_NEAR_DUPLICATE_THRESHOLD", NEAR_DUPLICATE_THRESHOLD
        )
    )
    match_min_similarity: float = field(
        default_factory=lambda: _env_float("SIFTMETRICS_MIN_SIMILARITY", MATCH_MIN_SIMILARITY)
    )

    # ── Logging ────────────────────────────────────────────────────────────────
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL))

    def __post_init__(self) -> None:
        if isinstance(self.sift_max_offset, bool) or not isinstance(self.sift_max_offset, int):
            raise ValueError(
                f"sift_max_offset must be an int, got {type(self.sift_max_offset).__name__}"
            )
        if self.sift_max_offset < 1:
            raise ValueError(f"sift_max_offset must be >= 1, got {self.sift_max_offset}")
        for name in ("near_duplicate_threshold", "match_min_similarity"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be in [0.0, 1.0], got {value}")
        self.log_level = self.log_level.upper()
