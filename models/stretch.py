"""
Domain models for stretches and routine items.

A routine is an ordered list of RoutineItem values. RoutineItem is a closed
tagged union of catalog stretches and the two synthesized fillers
(transition and rest periods), discriminated by the ``kind`` field.
"""

from enum import Enum
from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class BodyArea(str, Enum):
    """Body areas a stretch can target."""

    FULL_BODY = "Full Body"
    LOWER_BACK = "Lower Back"
    UPPER_BACK_CHEST = "Upper Back & Chest"
    NECK = "Neck"
    HIPS_LEGS = "Hips & Legs"
    SHOULDERS_ARMS = "Shoulders & Arms"
    DYNAMIC_FLOW = "Dynamic Flow"


class StretchPosition(str, Enum):
    """Body position a stretch is performed in."""

    STANDING = "Standing"
    SITTING = "Sitting"
    LYING = "Lying"


class Position(str, Enum):
    """Requested routine position. ALL disables position filtering."""

    STANDING = "Standing"
    SITTING = "Sitting"
    LYING = "Lying"
    ALL = "All"


class Stretch(BaseModel):
    """A single stretch from the read-only catalog."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: Literal["stretch"] = "stretch"
    id: Union[int, str]
    name: str
    description: str = ""
    duration: int = Field(gt=0, description="Base duration in seconds (per side)")
    tags: List[BodyArea] = Field(min_length=1)
    position: StretchPosition
    bilateral: bool = Field(
        default=False, description="Performed on both sides, doubling the duration"
    )
    premium: bool = False
    has_demo: bool = Field(default=False, alias="hasDemo")

    @property
    def effective_duration(self) -> int:
        """Seconds the stretch takes, counting both sides when bilateral."""
        return self.duration * 2 if self.bilateral else self.duration

    @property
    def primary_area(self) -> BodyArea:
        return self.tags[0]


class TransitionPeriod(BaseModel):
    """A synthesized pacing gap placed before a stretch."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["transition"] = "transition"
    id: str
    name: str = "Transition"
    description: str = "Get ready for the next stretch"
    duration: int = Field(gt=0)

    @property
    def effective_duration(self) -> int:
        return self.duration


class RestPeriod(BaseModel):
    """A synthesized rest between stretches."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["rest"] = "rest"
    id: str
    name: str = "Rest"
    description: str = "Take a short break"
    duration: int = Field(gt=0)

    @property
    def effective_duration(self) -> int:
        return self.duration


RoutineItem = Annotated[
    Union[Stretch, TransitionPeriod, RestPeriod],
    Field(discriminator="kind"),
]
