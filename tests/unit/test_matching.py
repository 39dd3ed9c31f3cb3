"""Unit tests for siftmetrics.matching.

Covers:
- is_near_duplicate: default threshold, strict threshold 1.0, None inputs
- best_match / best_match_score: happy path, ties, empty candidates
- find_matches: filtering and ordering
- Default thresholds taken from a configured MetricSuite
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from config.settings import MetricConfig
from siftmetrics.matching import best_match, best_match_score, find_matches, is_near_duplicate
from siftmetrics.metrics import MetricSuite
from siftmetrics.sift import SiftMetric


# ── is_near_duplicate ─────────────────────────────────────────────────────────────

class TestIsNearDuplicate:
    def test_plural_suffix_is_near_duplicate(self):
        assert is_near_duplicate("Annual report 2024", "Annual reports 2024")

    def test_unrelated_words_are_not(self):
        assert not is_near_duplicate("apple", "orange")

    def test_identical_at_threshold_one(self):
        """A length-stage similarity equal to the threshold falls back to the exact score."""
        assert is_near_duplicate("abc", "abc", threshold=1.0)

    def test_same_length_different_at_threshold_one(self):
        assert not is_near_duplicate("abc", "abd", threshold=1.0)

    def test_custom_threshold(self):
        """kitten/sitting scores 4/7 exactly."""
        assert is_near_duplicate("kitten", "sitting", threshold=0.5)
        assert not is_near_duplicate("kitten", "sitting", threshold=0.6)

    def test_none_inputs(self):
        assert is_near_duplicate(None, None)
        assert is_near_duplicate(None, "")
        assert not is_near_duplicate(None, "abc")

    def test_custom_suite(self):
        """A one-position Sift window cannot realign the shifted pair."""
        narrow = MetricSuite(sift=SiftMetric(max_offset=1))
        assert is_near_duplicate("abcdefghij", "bcdefghij", threshold=0.8)
        assert not is_near_duplicate("abcdefghij", "bcdefghij", threshold=0.8, suite=narrow)


# ── best_match ────────────────────────────────────────────────────────────────────

class TestBestMatch:
    def test_picks_closest(self):
        assert best_match("kitten", ["sitting", "kitchen", "mitten"]) == "mitten"

    def test_score(self):
        assert best_match_score("kitten", ["sitting", "kitchen", "mitten"]) == pytest.approx(
            1 - 1 / 6
        )

    def test_tie_keeps_first(self):
        assert best_match("abc", ["abd", "abe"]) == "abd"

    def test_empty_candidates(self):
        assert best_match("kitten", []) is None
        assert best_match_score("kitten", []) == 0.0

    def test_single_candidate_always_returned(self):
        assert best_match("kitten", ["zzzzzzzzzzzzzzzzz"]) == "zzzzzzzzzzzzzzzzz"

    def test_accepts_generator(self):
        assert best_match("mitten", (w for w in ["kitten", "mitten"])) == "mitten"

    def test_exact_scoring_skipped_for_hopeless_candidates(self):
        """Once an exact match is found, nothing else reaches the Levenshtein stage."""
        candidates = ["kitten", "kit", "sitting", "mittens"]
        with patch(
            "siftmetrics.metrics.levenshtein_similarity", wraps=lambda a, b: 1.0
        ) as lev:
            assert best_match("kitten", candidates) == "kitten"
        assert lev.call_count == 1


# ── find_matches ──────────────────────────────────────────────────────────────────

class TestFindMatches:
    def test_filters_and_orders(self):
        matches = find_matches("kitten", ["sitting", "kitchen", "mitten", "dog"], min_similarity=0.6)
        assert [m[0] for m in matches] == ["mitten", "kitchen"]
        assert matches[0][1] == pytest.approx(1 - 1 / 6)
        assert matches[1][1] == pytest.approx(1 - 2 / 7)

    def test_no_matches(self):
        assert find_matches("kitten", ["dog", "cat"], min_similarity=0.6) == []

    def test_empty_candidates(self):
        assert find_matches("kitten", []) == []

    def test_equal_scores_keep_input_order(self):
        matches = find_matches("abc", ["abe", "abd", "abc"], min_similarity=0.5)
        assert [m[0] for m in matches] == ["abc", "abe", "abd"]


# ── configured thresholds ─────────────────────────────────────────────────────────

class TestConfiguredThresholds:
    def test_near_duplicate_threshold_from_environment(self, clean_env):
        """kitten/sitting scores 4/7: below the 0.85 default, above a configured 0.5."""
        clean_env.setenv("SIFTMETRICS_NEAR_DUPLICATE_THRESHOLD", "0.5")
        suite = MetricSuite.from_config(MetricConfig())

        assert not is_near_duplicate("kitten", "sitting")
        assert is_near_duplicate("kitten", "sitting", suite=suite)

    def test_explicit_threshold_overrides_suite(self):
        suite = MetricSuite(near_duplicate_threshold=0.5)
        assert not is_near_duplicate("kitten", "sitting", threshold=0.6, suite=suite)

    def test_min_similarity_from_environment(self, clean_env):
        clean_env.setenv("SIFTMETRICS_MIN_SIMILARITY", "0.5")
        suite = MetricSuite.from_config(MetricConfig())
        candidates = ["sitting", "kitchen", "mitten", "dog"]

        assert [m[0] for m in find_matches("kitten", candidates)] == ["mitten", "kitchen"]
        assert [m[0] for m in find_matches("kitten", candidates, suite=suite)] == [
            "mitten",
            "kitchen",
            "sitting",
        ]

    def test_explicit_min_similarity_overrides_suite(self):
        suite = MetricSuite(match_min_similarity=0.5)
        assert find_matches("kitten", ["sitting"], min_similarity=0.6, suite=suite) == []
