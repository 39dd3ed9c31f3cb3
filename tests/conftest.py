"""Shared pytest fixtures for siftmetrics tests.

- Metric components are built fresh per test; they are immutable anyway
- random_pairs is seeded so failures reproduce
- clean_env strips SIFTMETRICS_* / LOG_LEVEL so MetricConfig sees defaults
"""

from __future__ import annotations

import random
from typing import List, Tuple

import pytest

_ENV_VARS = (
    "SIFTMETRICS_MAX_OFFSET",
    "SIFTMETRICS_FAST_MODE",
    "SIFTMETRICS_NEAR_DUPLICATE_THRESHOLD",
    "SIFTMETRICS_MIN_SIMILARITY",
    "LOG_LEVEL",
)


# ── Metric components ────────────────────────────────────────────────────────────

@pytest.fixture
def default_sift():
    """SiftMetric with max_offset=5, fast_mode off."""
    from siftmetrics.sift import SiftMetric

    return SiftMetric()


@pytest.fixture
def suite():
    """MetricSuite bound to a default SiftMetric."""
    from siftmetrics.metrics import MetricSuite

    return MetricSuite()


# ── Input data ───────────────────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def word_pairs() -> List[Tuple[str, str, int]]:
    """Hand-checked (s1, s2, levenshtein distance) triples."""
    return [
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("saturday", "sunday", 3),
        ("", "abc", 3),
        ("abc", "", 3),
        ("abc", "abc", 0),
        ("gumbo", "gambol", 2),
        ("book", "back", 2),
        ("a", "b", 1),
        ("intention", "execution", 5),
    ]


@pytest.fixture(scope="session")
def random_pairs() -> List[Tuple[str, str]]:
    """300 seeded random pairs over a small alphabet, lengths 0-12.

    A 3-letter alphabet keeps accidental matches frequent so all three
    cascade stages get exercised.
    """
    rng = random.Random(20240115)
    alphabet = "abc"
    pairs = []
    for _ in range(300):
        s1 = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 12)))
        s2 = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 12)))
        pairs.append((s1, s2))
    return pairs


# ── Environment ──────────────────────────────────────────────────────────────────

@pytest.fixture
def clean_env(monkeypatch):
    """Remove every environment variable MetricConfig reads."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
