"""
Models for routine intent, configuration and generation results.

ParsedIntent is what the free-text parser understood, RoutineConfig is the
fully resolved input of the stretch selector, and GeneratedRoutine is the
result handed back to the caller.
"""

from enum import Enum
from typing import Any, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.constants import (
    CUSTOM_WINDOW_MIN_RATIO,
    DURATION_WINDOWS,
    MAX_TRANSITION_DURATION,
    MIN_TRANSITION_DURATION,
)
from core.sanitization import sanitize_user_input
from models.stretch import BodyArea, Position, RoutineItem


class IssueType(str, Enum):
    """What the user wants the routine to address."""

    STIFFNESS = "stiffness"
    PAIN = "pain"
    TIREDNESS = "tiredness"
    FLEXIBILITY = "flexibility"


class DurationBucket(str, Enum):
    """Nominal routine lengths in minutes."""

    SHORT = "5"
    MEDIUM = "10"
    LONG = "15"


RoutineDuration = Union[DurationBucket, int]


def duration_minutes(duration: RoutineDuration) -> int:
    if isinstance(duration, DurationBucket):
        return int(duration.value)
    return int(duration)


def duration_window(duration: RoutineDuration) -> Tuple[float, float]:
    """
    Map a nominal duration to its (min, max) window in seconds.

    Buckets have fixed windows; any other minute value falls back to
    [80%, 100%] of its length.
    """
    minutes = duration_minutes(duration)
    if minutes in DURATION_WINDOWS:
        low, high = DURATION_WINDOWS[minutes]
        return float(low), float(high)
    return minutes * 60 * CUSTOM_WINDOW_MIN_RATIO, float(minutes * 60)


class ParsedIntent(BaseModel):
    """Partial intent extracted from free text. Absent fields are unconstrained."""

    raw_input: str = ""
    issue: Optional[IssueType] = None
    areas: List[BodyArea] = Field(default_factory=list)
    position: Optional[Position] = None
    activity: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return (
            self.issue is None
            and not self.areas
            and self.position is None
            and self.activity is None
        )


class RoutineConfig(BaseModel):
    """Canonical, immutable input of the stretch selector."""

    model_config = ConfigDict(frozen=True)

    areas: List[BodyArea] = Field(min_length=1)
    duration: RoutineDuration = DurationBucket.SHORT
    position: Position = Position.ALL
    issue_type: IssueType = IssueType.STIFFNESS
    is_desk_friendly: bool = False
    post_activity: Optional[str] = None
    transition_duration: int = Field(
        default=0,
        ge=MIN_TRANSITION_DURATION,
        le=MAX_TRANSITION_DURATION,
        description="Seconds between stretches, 0 disables transitions",
    )
    has_premium_access: bool = False

    @property
    def is_full_body(self) -> bool:
        return BodyArea.FULL_BODY in self.areas

    @property
    def duration_window(self) -> Tuple[float, float]:
        return duration_window(self.duration)

    def without_transitions(self) -> "RoutineConfig":
        """Clone with transitions disabled, used by the low-yield retry."""
        return self.model_copy(update={"transition_duration": 0})


class RoutineSummary(BaseModel):
    """Display-only description of the resolved configuration."""

    description: str
    issue_type: IssueType
    duration: RoutineDuration
    area: BodyArea
    transition_duration: int


class GeneratedRoutine(BaseModel):
    """A finished routine and its summary."""

    items: List[RoutineItem]
    summary: RoutineSummary
    stretch_count: int
    total_duration: int


class ParseIntentRequest(BaseModel):
    """Request model for parsing a free-text description."""

    text: str = Field(default="", description="What the user wants to stretch for")

    @field_validator("text", mode="before")
    @classmethod
    def sanitize_text(cls, v: Any) -> str:
        if not isinstance(v, str):
            return ""
        return sanitize_user_input(v)


class GenerateRoutineRequest(BaseModel):
    """Request model for generating a routine."""

    description: str = Field(
        default="",
        description="Free-text description, e.g. 'stiff neck from my desk job'",
    )
    issue_type: Optional[IssueType] = Field(
        None, description="Explicit issue selection, overrides the parsed issue"
    )
    position: Optional[Position] = Field(
        None, description="Explicit position selection, overrides the parsed position"
    )
    duration: RoutineDuration = Field(
        default=DurationBucket.SHORT,
        description="Duration bucket ('5', '10', '15') or whole minutes",
    )
    areas: List[BodyArea] = Field(
        default_factory=list,
        description="Explicit target areas, overrides the parsed areas",
    )
    desk_friendly: Optional[bool] = Field(
        None, description="Prefer unilateral stretches suited to an office"
    )

    @field_validator("description", mode="before")
    @classmethod
    def sanitize_description(cls, v: Any) -> str:
        if not isinstance(v, str):
            return ""
        return sanitize_user_input(v)

    @field_validator("duration")
    @classmethod
    def validate_duration(cls, v: RoutineDuration) -> RoutineDuration:
        # Runs on the resolved value so numeric strings are range checked too
        if not isinstance(v, DurationBucket) and not 1 <= v <= 60:
            raise ValueError("Duration must be between 1 and 60 minutes")
        return v


class TransitionDurationSetting(BaseModel):
    """Persisted transition duration setting."""

    transition_duration: int = Field(
        ge=MIN_TRANSITION_DURATION,
        le=MAX_TRANSITION_DURATION,
        description="Seconds between stretches, 0 disables transitions",
    )
