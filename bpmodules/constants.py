"""Scoring tables and search limits: no mutable state."""

# Combined effect level -> tier score, highest threshold first
TIER_THRESHOLDS: tuple[tuple[int, int], ...] = (
    (20, 20),
    (16, 16),
    (12, 12),
    (8,  8),
    (4,  4),
    (1,  1),
)

# Priority list position -> score multiplier
PRIORITY_MULTIPLIERS: tuple[int, ...] = (10, 7, 5, 3, 2)
DEFAULT_MULTIPLIER = 1
MAX_PRIORITY_EFFECTS = len(PRIORITY_MULTIPLIERS)

# Number of modules that can be equipped at once
SLOT_CHOICES: tuple[int, ...] = (2, 3, 4)

# Effect slots per module and the level cap of each (third slot = gold modules only)
EFFECTS_PER_MODULE = 3
EFFECT_LEVEL_CAPS: tuple[int, ...] = (10, 10, 5)

MODULE_DEFAULT_NAME_PREFIX = "Module"

# Search limits
FULL_SEARCH_LIMIT     = 100   # valid modules above this are prefiltered
PREFILTER_TOP_K       = 30    # modules kept per effect name
GREEDY_POOL_SIZE      = 50    # working pool of one greedy construction
REFINE_MAX_ITERATIONS = 20
REFINE_SAMPLE_SIZE    = 15    # swap candidates tried per position
REFINE_MIN_RELEVANT   = 10    # below this, refine against every module
TARGET_SOLUTIONS      = 40
MAX_ATTEMPTS          = TARGET_SOLUTIONS * 15
YIELD_EVERY           = 10    # attempts between cooperative yields
