"""
Routine configuration builder.

Merges a ParsedIntent with the user's explicit selections into the single
RoutineConfig the stretch selector consumes. Explicit selections always win
over parsed values; anything still missing gets a deterministic default, so
building a config never fails and never touches the catalog.
"""

import logging
from typing import Dict, List, Optional

from core.constants import MAX_TRANSITION_DURATION, MIN_TRANSITION_DURATION
from models.routine import (
    DurationBucket,
    IssueType,
    ParsedIntent,
    RoutineConfig,
    RoutineDuration,
)
from models.stretch import BodyArea, Position

logger = logging.getLogger(__name__)


# Position used when neither the user nor the text chose one
ISSUE_DEFAULT_POSITIONS: Dict[IssueType, Position] = {
    IssueType.PAIN: Position.SITTING,
    IssueType.STIFFNESS: Position.STANDING,
    IssueType.TIREDNESS: Position.LYING,
    IssueType.FLEXIBILITY: Position.STANDING,
}


def build_routine_config(
    intent: ParsedIntent,
    issue_type: Optional[IssueType] = None,
    position: Optional[Position] = None,
    duration: RoutineDuration = DurationBucket.SHORT,
    transition_duration: int = 0,
    has_premium_access: bool = False,
    desk_friendly: Optional[bool] = None,
    areas: Optional[List[BodyArea]] = None,
) -> RoutineConfig:
    """
    Build the canonical routine configuration.

    Precedence per field:
    - areas: explicit > parsed (first parsed area is primary) > Full Body
    - issue: explicit > parsed > flexibility after an activity, else stiffness
    - position: explicit > parsed > issue default
    - desk-friendly: explicit > true when no activity was mentioned

    Args:
        intent: Output of the intent parser (may be empty)
        issue_type: Explicit issue selection
        position: Explicit position selection
        duration: Duration bucket or whole minutes
        transition_duration: Persisted transition setting, clamped to 0-10s
        has_premium_access: Whether premium stretches may be included
        desk_friendly: Explicit desk-friendly preference
        areas: Explicit target areas

    Returns:
        Fully resolved RoutineConfig
    """
    resolved_areas = list(areas or intent.areas or [BodyArea.FULL_BODY])

    resolved_issue = issue_type or intent.issue
    if resolved_issue is None:
        resolved_issue = IssueType.FLEXIBILITY if intent.activity else IssueType.STIFFNESS

    resolved_position = position or intent.position or ISSUE_DEFAULT_POSITIONS[resolved_issue]

    if desk_friendly is None:
        desk_friendly = not intent.activity

    clamped_transition = max(
        MIN_TRANSITION_DURATION, min(MAX_TRANSITION_DURATION, int(transition_duration or 0))
    )

    config = RoutineConfig(
        areas=resolved_areas,
        duration=duration,
        position=resolved_position,
        issue_type=resolved_issue,
        is_desk_friendly=desk_friendly,
        post_activity=intent.activity,
        transition_duration=clamped_transition,
        has_premium_access=has_premium_access,
    )
    logger.info(
        f"Resolved routine config: areas={[a.value for a in config.areas]}, "
        f"duration={config.duration}, position={config.position.value}, "
        f"issue={config.issue_type.value}, desk_friendly={config.is_desk_friendly}, "
        f"transition={config.transition_duration}s"
    )
    return config
