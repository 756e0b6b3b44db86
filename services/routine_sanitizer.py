"""
Structural repair of finished routines.

A transition is only meaningful right before a stretch; anything else is an
orphan and gets dropped. Premium filtering removes stretches the requester
is not entitled to while leaving fillers untouched.
"""

from typing import List, Sequence

from models.stretch import RestPeriod, RoutineItem, Stretch, TransitionPeriod


def remove_orphan_transitions(items: Sequence[RoutineItem]) -> List[RoutineItem]:
    """
    Drop transitions not immediately followed by a stretch.

    A transition followed by a rest, another transition or nothing is removed.
    The result never starts or ends with a transition, and applying the
    function twice gives the same result as applying it once.
    """
    cleaned: List[RoutineItem] = []
    for index, item in enumerate(items):
        if isinstance(item, TransitionPeriod):
            following = items[index + 1] if index + 1 < len(items) else None
            if not isinstance(following, Stretch):
                continue
            if not cleaned:
                # Nothing precedes it, so it would open the routine
                continue
        cleaned.append(item)

    while cleaned and isinstance(cleaned[-1], TransitionPeriod):
        cleaned.pop()
    return cleaned


def filter_premium(items: Sequence[RoutineItem], has_premium_access: bool) -> List[RoutineItem]:
    """Remove premium stretches unless the requester is entitled to them."""
    filtered: List[RoutineItem] = []
    for item in items:
        if isinstance(item, Stretch):
            if item.premium and not has_premium_access:
                continue
            filtered.append(item)
        elif isinstance(item, (TransitionPeriod, RestPeriod)):
            filtered.append(item)
        else:
            raise TypeError(f"Unknown routine item type: {type(item).__name__}")
    return filtered


def count_stretches(items: Sequence[RoutineItem]) -> int:
    """Number of real stretches in a routine."""
    return sum(1 for item in items if isinstance(item, Stretch))
