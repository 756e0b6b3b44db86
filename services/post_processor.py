"""
Routine post-processing.

Repairs and extends the selector's initial routine:
- enforce_variety: breaks up repeated stretches and long single-area runs
- ensure_minimum_stretches: pads very short routines
- fill_to_target: tops the routine up towards the duration window maximum

All functions are pure: they return new lists and never mutate their inputs.
"""

import logging
import random
from typing import Iterable, List, Optional, Sequence, Set, Union

from core.constants import (
    MAX_OVERSHOOT_ITEMS,
    MIN_STRETCH_COUNT,
    TOP_UP_RATIO,
    VARIETY_MAX_RUN,
)
from models.stretch import RoutineItem, Stretch, TransitionPeriod
from services.stretch_selector import make_transition

logger = logging.getLogger(__name__)


def routine_duration(items: Iterable[RoutineItem]) -> int:
    """Total seconds of a routine, counting bilateral stretches twice."""
    return sum(item.effective_duration for item in items)


def _stretch_ids(items: Iterable[RoutineItem]) -> Set[Union[int, str]]:
    return {item.id for item in items if isinstance(item, Stretch)}


def _fits(
    current: float,
    transition: int,
    stretch: Stretch,
    max_seconds: float,
    overshoot_items: int,
) -> bool:
    """Whether appending the stretch keeps the total within the overshoot tolerance."""
    allowance = max_seconds + overshoot_items * stretch.effective_duration
    return current + transition + stretch.effective_duration <= allowance


def enforce_variety(
    items: Sequence[RoutineItem],
    pool: Sequence[Stretch],
    max_run: int = VARIETY_MAX_RUN,
) -> List[RoutineItem]:
    """
    Break up repetition in a routine.

    A stretch is replaced by an unused pool stretch when it repeats the
    previous stretch, or when it would make more than ``max_run`` consecutive
    stretches share the same primary area. Replacements for long runs must
    come from a different area. Best effort: without a qualifying
    replacement the item stays. Transitions and rests do not break a run.

    Args:
        items: Routine to repair
        pool: Filtered candidate stretches
        max_run: Longest allowed single-area run

    Returns:
        Repaired routine
    """
    result: List[RoutineItem] = list(items)
    used = _stretch_ids(result)
    previous: Optional[Stretch] = None
    run_length = 0

    for index, item in enumerate(result):
        if not isinstance(item, Stretch):
            continue

        replacement: Optional[Stretch] = None
        if previous is not None and item.id == previous.id:
            replacement = next(
                (s for s in pool if s.id not in used and s.id != previous.id), None
            )
        elif (
            previous is not None
            and item.primary_area == previous.primary_area
            and run_length >= max_run
        ):
            replacement = next(
                (
                    s
                    for s in pool
                    if s.id not in used and s.primary_area != previous.primary_area
                ),
                None,
            )

        if replacement is not None:
            logger.debug(f"Variety swap at position {index}: {item.id} -> {replacement.id}")
            result[index] = replacement
            used.add(replacement.id)
            item = replacement

        if previous is not None and item.primary_area == previous.primary_area:
            run_length += 1
        else:
            run_length = 1
        previous = item

    return result


def ensure_minimum_stretches(
    items: Sequence[RoutineItem],
    pool: Sequence[Stretch],
    transition_duration: int,
    max_seconds: float,
    minimum: int = MIN_STRETCH_COUNT,
    rng: Optional[random.Random] = None,
    overshoot_items: int = MAX_OVERSHOOT_ITEMS,
) -> List[RoutineItem]:
    """
    Pad a routine that has fewer than ``minimum`` stretches.

    Unused pool stretches are appended in random order, each preceded by a
    transition when transitions are enabled, as long as the total stays
    within the window maximum plus the overshoot tolerance.
    """
    result: List[RoutineItem] = list(items)
    used = _stretch_ids(result)
    needed = minimum - len(used)
    if needed <= 0:
        return result

    candidates = [s for s in pool if s.id not in used]
    (rng or random.Random()).shuffle(candidates)
    current = routine_duration(result)

    for stretch in candidates:
        if needed <= 0:
            break
        transition = transition_duration if transition_duration > 0 and result else 0
        if not _fits(current, transition, stretch, max_seconds, overshoot_items):
            continue
        if transition:
            result.append(make_transition(f"transition-extra-{len(result)}", transition))
        result.append(stretch)
        current += transition + stretch.effective_duration
        needed -= 1

    return result


def fill_to_target(
    items: Sequence[RoutineItem],
    pool: Sequence[Stretch],
    max_seconds: float,
    transition_duration: int,
    target_ratio: float = TOP_UP_RATIO,
    rng: Optional[random.Random] = None,
    overshoot_items: int = MAX_OVERSHOOT_ITEMS,
) -> List[RoutineItem]:
    """
    Top a routine up towards ``target_ratio`` of the window maximum.

    While the total is below the target and unused pool stretches remain,
    append one (preceded by a transition when enabled). The last addition
    may overshoot the maximum by up to ``overshoot_items`` stretches.
    A trailing transition is removed.

    Args:
        items: Routine to extend
        pool: Filtered candidate stretches
        max_seconds: Maximum of the duration window
        transition_duration: Seconds per transition, 0 for none
        target_ratio: Share of the maximum to reach
        rng: Random generator for the order of additions
        overshoot_items: Tolerated overshoot, in stretches

    Returns:
        Extended routine
    """
    result: List[RoutineItem] = list(items)
    target = max_seconds * target_ratio
    current = routine_duration(result)
    used = _stretch_ids(result)

    candidates = [s for s in pool if s.id not in used]
    (rng or random.Random()).shuffle(candidates)

    for stretch in candidates:
        if current >= target:
            break
        transition = transition_duration if transition_duration > 0 and result else 0
        if not _fits(current, transition, stretch, max_seconds, overshoot_items):
            continue
        if transition:
            result.append(make_transition(f"transition-pad-{len(result)}", transition))
        result.append(stretch)
        current += transition + stretch.effective_duration

    while result and isinstance(result[-1], TransitionPeriod):
        result.pop()

    logger.debug(f"Filled routine to {current}s of {target:.0f}s target")
    return result
