"""
Free-text intent parser.

Turns a description such as "stiff neck from my desk job" into a partial
ParsedIntent. Matching is keyword based against fixed, ordered vocabularies:
body areas collect every distinct match, while issue, activity and position
take the first vocabulary entry found in the text. Nothing is defaulted here;
an empty or unrecognised description yields an all-absent intent and the
config builder fills in the gaps.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Pattern, Tuple

from models.routine import IssueType, ParsedIntent
from models.stretch import BodyArea, Position

logger = logging.getLogger(__name__)


AREA_KEYWORDS: Dict[str, BodyArea] = {
    # Neck
    "neck": BodyArea.NECK,
    "throat": BodyArea.NECK,
    "cervical": BodyArea.NECK,
    # Shoulders & Arms
    "shoulder": BodyArea.SHOULDERS_ARMS,
    "deltoid": BodyArea.SHOULDERS_ARMS,
    "arm": BodyArea.SHOULDERS_ARMS,
    "elbow": BodyArea.SHOULDERS_ARMS,
    "wrist": BodyArea.SHOULDERS_ARMS,
    "hand": BodyArea.SHOULDERS_ARMS,
    "finger": BodyArea.SHOULDERS_ARMS,
    "bicep": BodyArea.SHOULDERS_ARMS,
    "tricep": BodyArea.SHOULDERS_ARMS,
    "forearm": BodyArea.SHOULDERS_ARMS,
    # Upper Back & Chest
    "upper back": BodyArea.UPPER_BACK_CHEST,
    "thoracic": BodyArea.UPPER_BACK_CHEST,
    "chest": BodyArea.UPPER_BACK_CHEST,
    "pectoral": BodyArea.UPPER_BACK_CHEST,
    "pec": BodyArea.UPPER_BACK_CHEST,
    "trap": BodyArea.UPPER_BACK_CHEST,
    "trapezius": BodyArea.UPPER_BACK_CHEST,
    "posture": BodyArea.UPPER_BACK_CHEST,
    "slouch": BodyArea.UPPER_BACK_CHEST,
    # Lower Back
    "lower back": BodyArea.LOWER_BACK,
    "lumbar": BodyArea.LOWER_BACK,
    "spine": BodyArea.LOWER_BACK,
    "back pain": BodyArea.LOWER_BACK,
    "sciatic": BodyArea.LOWER_BACK,
    # Hips & Legs
    "hip": BodyArea.HIPS_LEGS,
    "leg": BodyArea.HIPS_LEGS,
    "thigh": BodyArea.HIPS_LEGS,
    "quad": BodyArea.HIPS_LEGS,
    "hamstring": BodyArea.HIPS_LEGS,
    "calf": BodyArea.HIPS_LEGS,
    "calves": BodyArea.HIPS_LEGS,
    "knee": BodyArea.HIPS_LEGS,
    "ankle": BodyArea.HIPS_LEGS,
    "foot": BodyArea.HIPS_LEGS,
    "feet": BodyArea.HIPS_LEGS,
    "toe": BodyArea.HIPS_LEGS,
    "glute": BodyArea.HIPS_LEGS,
    "piriformis": BodyArea.HIPS_LEGS,
    "it band": BodyArea.HIPS_LEGS,
    "iliotibial": BodyArea.HIPS_LEGS,
    # Full Body (wildcard in the selector)
    "full": BodyArea.FULL_BODY,
    "body": BodyArea.FULL_BODY,
    "whole": BodyArea.FULL_BODY,
    "entire": BodyArea.FULL_BODY,
    "all over": BodyArea.FULL_BODY,
    "everything": BodyArea.FULL_BODY,
    "head to toe": BodyArea.FULL_BODY,
}

ISSUE_KEYWORDS: Dict[str, IssueType] = {
    # Stiffness
    "stiff": IssueType.STIFFNESS,
    "tight": IssueType.STIFFNESS,
    "tense": IssueType.STIFFNESS,
    "rigid": IssueType.STIFFNESS,
    "restricted": IssueType.STIFFNESS,
    "limited": IssueType.STIFFNESS,
    "stuck": IssueType.STIFFNESS,
    "lock": IssueType.STIFFNESS,
    "knot": IssueType.STIFFNESS,
    "cramped": IssueType.STIFFNESS,
    # Pain
    "pain": IssueType.PAIN,
    "ache": IssueType.PAIN,
    "aching": IssueType.PAIN,
    "hurt": IssueType.PAIN,
    "sore": IssueType.PAIN,
    "tender": IssueType.PAIN,
    "discomfort": IssueType.PAIN,
    "irritation": IssueType.PAIN,
    "sharp": IssueType.PAIN,
    "shooting": IssueType.PAIN,
    "throbbing": IssueType.PAIN,
    "burning": IssueType.PAIN,
    # Tiredness
    "tired": IssueType.TIREDNESS,
    "fatigue": IssueType.TIREDNESS,
    "exhaust": IssueType.TIREDNESS,
    "worn": IssueType.TIREDNESS,
    "drained": IssueType.TIREDNESS,
    "lethargic": IssueType.TIREDNESS,
    "sluggish": IssueType.TIREDNESS,
    "weary": IssueType.TIREDNESS,
    "weak": IssueType.TIREDNESS,
    "recover": IssueType.TIREDNESS,
    "rest": IssueType.TIREDNESS,
    # Flexibility
    "stretch": IssueType.FLEXIBILITY,
    "flexib": IssueType.FLEXIBILITY,
    "mobility": IssueType.FLEXIBILITY,
    "loosen": IssueType.FLEXIBILITY,
    "limber": IssueType.FLEXIBILITY,
    "supple": IssueType.FLEXIBILITY,
    "agile": IssueType.FLEXIBILITY,
    "range of motion": IssueType.FLEXIBILITY,
}

ACTIVITY_KEYWORDS: Dict[str, str] = {
    # Running
    "running": "running",
    "run": "running",
    "jogging": "running",
    "jog": "running",
    "sprint": "running",
    # Cycling
    "cycling": "cycling",
    "cycle": "cycling",
    "biking": "cycling",
    "bike": "cycling",
    "spinning": "cycling",
    # Swimming
    "swimming": "swimming",
    "swim": "swimming",
    "pool": "swimming",
    # Workouts
    "workout": "working out",
    "exercise": "working out",
    "training": "working out",
    "gym": "working out",
    "cardio": "working out",
    "weights": "working out",
    "lifting": "weight lifting",
    "lift": "weight lifting",
    "strength": "weight lifting",
    # Sport and movement
    "yoga": "yoga",
    "pilates": "pilates",
    "hiking": "hiking",
    "hike": "hiking",
    "walking": "walking",
    "walk": "walking",
    "tennis": "tennis",
    "golf": "golf",
    "basketball": "basketball",
    "soccer": "soccer",
    "football": "football",
    "hockey": "hockey",
    "baseball": "baseball",
    "volleyball": "volleyball",
    "climbing": "climbing",
    "danc": "dancing",
    # Desk and sedentary
    "sitting": "sitting",
    "computer": "desk work",
    "desk": "desk work",
    "typing": "desk work",
    "coding": "desk work",
    "gaming": "gaming",
    "driving": "driving",
    "commuting": "commuting",
}

POSITION_KEYWORDS: Dict[str, Position] = {
    "stand": Position.STANDING,
    "upright": Position.STANDING,
    "sit": Position.SITTING,
    "chair": Position.SITTING,
    "seated": Position.SITTING,
    "lie": Position.LYING,
    "lying": Position.LYING,
    "floor": Position.LYING,
    "mat": Position.LYING,
    "bed": Position.LYING,
    "ground": Position.LYING,
}


@dataclass(frozen=True)
class ContextHint:
    """Fields implied by a multi-word phrase."""

    area: Optional[BodyArea] = None
    issue: Optional[IssueType] = None
    activity: Optional[str] = None
    position: Optional[Position] = None


CONTEXT_PATTERNS: Dict[str, ContextHint] = {
    "hunched over": ContextHint(area=BodyArea.UPPER_BACK_CHEST, issue=IssueType.STIFFNESS),
    "slumped": ContextHint(area=BodyArea.UPPER_BACK_CHEST, issue=IssueType.STIFFNESS),
    "rounded shoulders": ContextHint(area=BodyArea.UPPER_BACK_CHEST, issue=IssueType.STIFFNESS),
    "text neck": ContextHint(area=BodyArea.NECK, issue=IssueType.STIFFNESS),
    "tech neck": ContextHint(area=BodyArea.NECK, issue=IssueType.STIFFNESS),
    "poor posture": ContextHint(area=BodyArea.UPPER_BACK_CHEST, issue=IssueType.STIFFNESS),
    "desk job": ContextHint(activity="desk work", position=Position.SITTING),
    "office work": ContextHint(activity="desk work", position=Position.SITTING),
    "woke up": ContextHint(issue=IssueType.STIFFNESS),
    "morning": ContextHint(issue=IssueType.STIFFNESS),
    "before bed": ContextHint(issue=IssueType.TIREDNESS, position=Position.LYING),
    "quick stretch": ContextHint(issue=IssueType.FLEXIBILITY),
    "cool down": ContextHint(issue=IssueType.TIREDNESS),
    "warm up": ContextHint(issue=IssueType.FLEXIBILITY),
    "at my desk": ContextHint(position=Position.SITTING),
    "on the floor": ContextHint(position=Position.LYING),
    "standing up": ContextHint(position=Position.STANDING),
    "standing desk": ContextHint(position=Position.STANDING),
}


def _compile(vocabulary: Dict[str, object]) -> List[Tuple[Pattern[str], object]]:
    # Keywords anchor at a word start so stems also match inflected forms
    return [(re.compile(r"\b" + re.escape(keyword)), value) for keyword, value in vocabulary.items()]


class IntentParser:
    """
    Keyword-based parser for free-text routine descriptions.

    Stateless; one instance can be shared across requests.
    """

    def __init__(self):
        self._areas = _compile(AREA_KEYWORDS)
        self._issues = _compile(ISSUE_KEYWORDS)
        self._activities = _compile(ACTIVITY_KEYWORDS)
        self._positions = _compile(POSITION_KEYWORDS)
        self._contexts = _compile(CONTEXT_PATTERNS)
        self._desk_mention = re.compile(r"\bdesk")

    def parse(self, text: str) -> ParsedIntent:
        """
        Parse a free-text description into a partial intent.

        Args:
            text: The user's description, possibly empty

        Returns:
            ParsedIntent with only the recognised fields populated
        """
        lowered = (text or "").lower()
        if not lowered.strip():
            return ParsedIntent(raw_input=text or "")

        areas: List[BodyArea] = []
        for pattern, area in self._areas:
            if area not in areas and pattern.search(lowered):
                areas.append(area)

        issue = self._first_match(self._issues, lowered)
        activity = self._first_match(self._activities, lowered)
        position = self._first_match(self._positions, lowered)

        # Contextual phrases add areas and only fill fields still missing
        for pattern, hint in self._contexts:
            if not pattern.search(lowered):
                continue
            if hint.area and hint.area not in areas:
                areas.append(hint.area)
            issue = issue or hint.issue
            activity = activity or hint.activity
            position = position or hint.position

        if position is None:
            if activity == "desk work" or self._desk_mention.search(lowered):
                position = Position.SITTING
            elif activity == "yoga":
                position = Position.LYING

        intent = ParsedIntent(
            raw_input=text,
            issue=issue,
            areas=areas,
            position=position,
            activity=activity,
        )
        logger.debug(
            f"Parsed intent: areas={[a.value for a in areas]}, issue={issue}, "
            f"activity={activity}, position={position}"
        )
        return intent

    @staticmethod
    def _first_match(patterns, text: str):
        for pattern, value in patterns:
            if pattern.search(text):
                return value
        return None
