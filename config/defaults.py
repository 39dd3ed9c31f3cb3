"""siftmetrics — All default threshold values and configuration constants.

All tuneable values live here. Import constants from this module; override
via MetricConfig at runtime.
"""

# ── Sift approximation ─────────────────────────────────────────────────────────
# How many positions ahead, on each side, the Sift scan looks for a
# re-matching character after a mismatch
SIFT_MAX_OFFSET: int = 5

# Alternate cursor-advance rule: jumps past the last offset on a mismatch.
# Faster on long shifted inputs, less reliable. Off by default.
SIFT_FAST_MODE: bool = False

# ── Matching helpers ───────────────────────────────────────────────────────────
# Similarity above which two sequences count as near-duplicates
NEAR_DUPLICATE_THRESHOLD: float = 0.85

# Similarity floor for find_matches candidates
MATCH_MIN_SIMILARITY: float = 0.6

# ── Logging ────────────────────────────────────────────────────────────────────
DEFAULT_LOG_LEVEL: str = "INFO"
