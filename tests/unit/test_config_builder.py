"""
Unit tests for building a RoutineConfig from an intent and selections.
"""

import pytest

from models.routine import DurationBucket, IssueType, ParsedIntent
from models.stretch import BodyArea, Position
from services.config_builder import ISSUE_DEFAULT_POSITIONS, build_routine_config


@pytest.mark.unit
class TestDefaults:
    def test_empty_intent_gets_full_defaults(self):
        config = build_routine_config(ParsedIntent())

        assert config.areas == [BodyArea.FULL_BODY]
        assert config.issue_type == IssueType.STIFFNESS
        assert config.position == Position.STANDING
        assert config.is_desk_friendly is True
        assert config.duration == DurationBucket.SHORT
        assert config.transition_duration == 0
        assert config.has_premium_access is False

    def test_activity_defaults_issue_to_flexibility(self):
        config = build_routine_config(ParsedIntent(activity="running"))

        assert config.issue_type == IssueType.FLEXIBILITY
        assert config.post_activity == "running"
        assert config.is_desk_friendly is False

    @pytest.mark.parametrize("issue,position", list(ISSUE_DEFAULT_POSITIONS.items()))
    def test_position_defaults_follow_issue(self, issue, position):
        config = build_routine_config(ParsedIntent(issue=issue))
        assert config.position == position


@pytest.mark.unit
class TestPrecedence:
    def test_parsed_values_used(self):
        intent = ParsedIntent(
            areas=[BodyArea.NECK, BodyArea.SHOULDERS_ARMS],
            issue=IssueType.PAIN,
            position=Position.LYING,
        )
        config = build_routine_config(intent)

        assert config.areas == [BodyArea.NECK, BodyArea.SHOULDERS_ARMS]
        assert config.issue_type == IssueType.PAIN
        assert config.position == Position.LYING

    def test_explicit_selections_override_parsed(self):
        intent = ParsedIntent(
            areas=[BodyArea.NECK],
            issue=IssueType.PAIN,
            position=Position.LYING,
            activity="desk work",
        )
        config = build_routine_config(
            intent,
            issue_type=IssueType.TIREDNESS,
            position=Position.ALL,
            areas=[BodyArea.HIPS_LEGS],
            desk_friendly=True,
        )

        assert config.areas == [BodyArea.HIPS_LEGS]
        assert config.issue_type == IssueType.TIREDNESS
        assert config.position == Position.ALL
        assert config.is_desk_friendly is True

    def test_empty_explicit_areas_fall_back_to_parsed(self):
        config = build_routine_config(ParsedIntent(areas=[BodyArea.NECK]), areas=[])
        assert config.areas == [BodyArea.NECK]

    def test_explicit_desk_friendly_false(self):
        config = build_routine_config(ParsedIntent(), desk_friendly=False)
        assert config.is_desk_friendly is False


@pytest.mark.unit
class TestPassThrough:
    def test_duration_and_premium(self):
        config = build_routine_config(
            ParsedIntent(),
            duration=DurationBucket.LONG,
            has_premium_access=True,
        )
        assert config.duration == DurationBucket.LONG
        assert config.has_premium_access is True

    def test_custom_duration_minutes(self):
        config = build_routine_config(ParsedIntent(), duration=7)
        assert config.duration_window == (336.0, 420.0)

    @pytest.mark.parametrize("given,expected", [(-3, 0), (0, 0), (5, 5), (10, 10), (25, 10)])
    def test_transition_is_clamped(self, given, expected):
        config = build_routine_config(ParsedIntent(), transition_duration=given)
        assert config.transition_duration == expected
