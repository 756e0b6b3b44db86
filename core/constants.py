"""
Shared constants for routine generation.

This module has no dependencies on models or services to avoid circular imports.
"""

from typing import Dict, Tuple

# Duration windows (seconds) for the fixed duration buckets, keyed by minutes
DURATION_WINDOWS: Dict[int, Tuple[int, int]] = {
    5: (180, 300),
    10: (360, 600),
    15: (660, 900),
}

# Window bounds for arbitrary minute values, as a fraction of the nominal length
CUSTOM_WINDOW_MIN_RATIO = 0.8

# Below this many area matches the selector falls back to every demo stretch
MIN_CANDIDATE_POOL = 3

# Longest allowed run of consecutive stretches sharing a primary area
VARIETY_MAX_RUN = 3

# Routines with fewer stretches are padded by the post-processor
MIN_STRETCH_COUNT = 3

# Top-up stops once the routine reaches this share of the window maximum
TOP_UP_RATIO = 0.9

# Number of items the top-up may overshoot the window maximum by
MAX_OVERSHOOT_ITEMS = 1

# Low-yield augmentation
MAX_AUGMENT_RETRIES = 1
MAX_AUGMENT_ITEMS = 4

# Transition duration setting (seconds)
MIN_TRANSITION_DURATION = 0
MAX_TRANSITION_DURATION = 10
DEFAULT_TRANSITION_DURATION = 5

# Maximum length of a free-text routine description
MAX_DESCRIPTION_LENGTH = 500
