"""
Services package for the stretch routine API.

Contains the routine generation pipeline:
- Intent parsing (free text to a partial intent)
- Config building (intent plus explicit selections)
- Stretch selection (filtering, shuffle, greedy assembly)
- Post-processing (variety, minimum count, duration top-up)
- Sanitization (premium filtering, orphan transitions)
- Routine generation (orchestration and low-yield augmentation)
"""

from services.config_builder import ISSUE_DEFAULT_POSITIONS, build_routine_config
from services.intent_parser import IntentParser
from services.post_processor import (
    enforce_variety,
    ensure_minimum_stretches,
    fill_to_target,
    routine_duration,
)
from services.routine_generator import RoutineGenerator
from services.routine_sanitizer import (
    count_stretches,
    filter_premium,
    remove_orphan_transitions,
)
from services.stretch_selector import StretchSelector, make_transition

__all__ = [
    # Parsing and configuration
    "IntentParser",
    "ISSUE_DEFAULT_POSITIONS",
    "build_routine_config",
    # Selection
    "StretchSelector",
    "make_transition",
    # Post-processing
    "enforce_variety",
    "ensure_minimum_stretches",
    "fill_to_target",
    "routine_duration",
    # Sanitization
    "count_stretches",
    "filter_premium",
    "remove_orphan_transitions",
    # Orchestration
    "RoutineGenerator",
]
