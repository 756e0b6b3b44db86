"""Models package for the stretch routine API."""

from models.stretch import (
    BodyArea,
    Position,
    RestPeriod,
    RoutineItem,
    Stretch,
    StretchPosition,
    TransitionPeriod,
)
from models.routine import (
    DurationBucket,
    GeneratedRoutine,
    GenerateRoutineRequest,
    IssueType,
    ParsedIntent,
    ParseIntentRequest,
    RoutineConfig,
    RoutineSummary,
    TransitionDurationSetting,
    duration_window,
)

__all__ = [
    "BodyArea",
    "Position",
    "RestPeriod",
    "RoutineItem",
    "Stretch",
    "StretchPosition",
    "TransitionPeriod",
    "DurationBucket",
    "GeneratedRoutine",
    "GenerateRoutineRequest",
    "IssueType",
    "ParsedIntent",
    "ParseIntentRequest",
    "RoutineConfig",
    "RoutineSummary",
    "TransitionDurationSetting",
    "duration_window",
]
