"""
Unit tests for routine post-processing (variety, minimum count, top-up).
"""

import random

import pytest

from models.stretch import BodyArea, Stretch, TransitionPeriod
from services.post_processor import (
    enforce_variety,
    ensure_minimum_stretches,
    fill_to_target,
    routine_duration,
)
from services.stretch_selector import make_transition
from tests.fakes import make_stretch


def _stretch_ids(items):
    return [item.id for item in items if isinstance(item, Stretch)]


@pytest.mark.unit
class TestRoutineDuration:
    def test_counts_bilateral_twice_and_transitions_once(self):
        items = [
            make_stretch(1, duration=30, bilateral=True),
            make_transition("transition-1", 5),
            make_stretch(2, duration=20),
        ]
        assert routine_duration(items) == 85

    def test_empty(self):
        assert routine_duration([]) == 0


@pytest.mark.unit
class TestEnforceVariety:
    def test_replaces_consecutive_duplicate(self):
        a, b, c = make_stretch("a"), make_stretch("b"), make_stretch("c")
        result = enforce_variety([a, a, b], [a, b, c])
        assert _stretch_ids(result) == ["a", "c", "b"]

    def test_breaks_long_single_area_run(self):
        necks = [make_stretch(f"n{i}", BodyArea.NECK) for i in range(1, 5)]
        hips = make_stretch("h1", BodyArea.HIPS_LEGS)
        items = [necks[0], make_transition("transition-1", 5), necks[1],
                 make_transition("transition-3", 5), necks[2],
                 make_transition("transition-5", 5), necks[3]]

        result = enforce_variety(items, necks + [hips])

        assert _stretch_ids(result) == ["n1", "n2", "n3", "h1"]
        assert isinstance(result[5], TransitionPeriod)

    def test_run_of_max_length_is_kept(self):
        necks = [make_stretch(f"n{i}", BodyArea.NECK) for i in range(1, 4)]
        hips = make_stretch("h1", BodyArea.HIPS_LEGS)
        assert _stretch_ids(enforce_variety(necks, necks + [hips])) == ["n1", "n2", "n3"]

    def test_keeps_item_without_qualifying_replacement(self):
        necks = [make_stretch(f"n{i}", BodyArea.NECK) for i in range(1, 6)]
        result = enforce_variety(necks, necks)
        assert _stretch_ids(result) == ["n1", "n2", "n3", "n4", "n5"]

    def test_replacements_are_not_reused(self):
        a = make_stretch("a")
        b = make_stretch("b")
        result = enforce_variety([a, a, a], [a, b])
        assert _stretch_ids(result).count("b") == 1

    def test_custom_max_run(self):
        necks = [make_stretch(f"n{i}", BodyArea.NECK) for i in range(1, 3)]
        hips = make_stretch("h1", BodyArea.HIPS_LEGS)
        result = enforce_variety(necks, necks + [hips], max_run=1)
        assert _stretch_ids(result) == ["n1", "h1"]

    def test_does_not_mutate_input(self):
        a, b = make_stretch("a"), make_stretch("b")
        items = [a, a]
        enforce_variety(items, [a, b])
        assert _stretch_ids(items) == ["a", "a"]


@pytest.mark.unit
class TestEnsureMinimumStretches:
    def test_pads_to_minimum(self):
        pool = [make_stretch(i) for i in range(1, 6)]
        result = ensure_minimum_stretches(
            [pool[0]], pool, transition_duration=5, max_seconds=300, rng=random.Random(1)
        )

        assert len(_stretch_ids(result)) == 3
        assert len(set(_stretch_ids(result))) == 3
        assert [type(item) for item in result] == [
            Stretch, TransitionPeriod, Stretch, TransitionPeriod, Stretch
        ]

    def test_no_transitions_when_disabled(self):
        pool = [make_stretch(i) for i in range(1, 6)]
        result = ensure_minimum_stretches([pool[0]], pool, 0, 300, rng=random.Random(1))
        assert all(isinstance(item, Stretch) for item in result)

    def test_untouched_when_minimum_met(self):
        pool = [make_stretch(i) for i in range(1, 6)]
        items = pool[:3]
        assert ensure_minimum_stretches(items, pool, 5, 300) == items

    def test_respects_overshoot_tolerance(self):
        long_stretch = make_stretch("long", duration=290)
        pool = [long_stretch, make_stretch("b", duration=30), make_stretch("c", duration=30)]
        result = ensure_minimum_stretches([long_stretch], pool, 0, 300, rng=random.Random(1))

        # 290 + 30 fits within one stretch of overshoot, a second 30 does not
        assert len(_stretch_ids(result)) == 2
        assert routine_duration(result) == 320

    def test_small_pool(self):
        pool = [make_stretch(1)]
        assert _stretch_ids(ensure_minimum_stretches(pool, pool, 5, 300)) == [1]


@pytest.mark.unit
class TestFillToTarget:
    def test_tops_up_to_ninety_percent_of_maximum(self):
        pool = [make_stretch(i, duration=30) for i in range(1, 13)]
        result = fill_to_target([pool[0]], pool, 300, 5, rng=random.Random(3))

        total = routine_duration(result)
        assert 270 <= total <= 300 + 30
        assert len(set(_stretch_ids(result))) == len(_stretch_ids(result))
        assert isinstance(result[-1], Stretch)

    def test_only_unused_stretches(self):
        a, b = make_stretch("a"), make_stretch("b")
        result = fill_to_target([a], [a, b], 300, 5, rng=random.Random(3))
        assert _stretch_ids(result) == ["a", "b"]
        assert routine_duration(result) == 65

    def test_drops_trailing_transition(self):
        a = make_stretch("a")
        result = fill_to_target([a, make_transition("transition-1", 5)], [a], 300, 5)
        assert result == [a]

    def test_already_at_target(self):
        pool = [make_stretch(i, duration=100) for i in range(1, 6)]
        items = pool[:3]
        assert fill_to_target(items, pool, 300, 0) == items

    def test_custom_target_ratio(self):
        pool = [make_stretch(i, duration=30) for i in range(1, 13)]
        result = fill_to_target([pool[0]], pool, 300, 0, target_ratio=0.5, rng=random.Random(3))
        assert routine_duration(result) == 150
