"""
Stretch selector service.

Builds the initial routine from the catalog for a RoutineConfig:

0. Eligibility: stretches with a demo, premium ones only for entitled requesters
1. Area filter (Full Body is a wildcard), falling back to every eligible stretch
   when fewer than MIN_CANDIDATE_POOL match
2. Position filter, skipped when it would empty the pool
3. Desk-friendly filter (unilateral stretches only), skipped when empty
4. Stable partition putting the requested position first
5. Shuffle with the injected random generator
6. Greedy assembly towards the minimum of the duration window

Filters relax independently: when the area and the position filter both
relax in one run, the pool is every eligible stretch in any position.
The selector never raises; a thin catalog simply yields a short routine.
"""

import logging
import random
from typing import List, Optional, Sequence

from core.constants import MIN_CANDIDATE_POOL
from models.routine import RoutineConfig
from models.stretch import Position, RoutineItem, Stretch, TransitionPeriod

logger = logging.getLogger(__name__)


def make_transition(transition_id: str, duration: int) -> TransitionPeriod:
    """Create a transition period of the given length."""
    return TransitionPeriod(id=transition_id, duration=duration)


class StretchSelector:
    """
    Selects catalog stretches for a routine configuration.

    The shuffle is the only source of randomness in routine generation; pass
    a seeded ``random.Random`` for reproducible output.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize the stretch selector.

        Args:
            rng: Random generator used for shuffling (unseeded if omitted)
        """
        self._rng = rng or random.Random()

    @property
    def rng(self) -> random.Random:
        return self._rng

    def candidate_pool(
        self,
        config: RoutineConfig,
        catalog: Sequence[Stretch],
    ) -> List[Stretch]:
        """
        Apply the eligibility, area, position and desk-friendly filters (steps 0-4).

        Args:
            config: Resolved routine configuration
            catalog: Full read-only catalog

        Returns:
            Filtered stretches, requested position first
        """
        eligible = [
            s
            for s in catalog
            if s.has_demo and (config.has_premium_access or not s.premium)
        ]

        if config.is_full_body:
            pool = list(eligible)
        else:
            wanted = set(config.areas)
            pool = [s for s in eligible if wanted.intersection(s.tags)]

        if len(pool) < MIN_CANDIDATE_POOL:
            logger.debug(
                f"Only {len(pool)} stretches match areas "
                f"{[a.value for a in config.areas]}, relaxing area filter"
            )
            pool = list(eligible)

        if config.position != Position.ALL:
            positioned = [s for s in pool if s.position.value == config.position.value]
            if positioned:
                pool = positioned
            else:
                logger.debug(
                    f"No stretches in position {config.position.value}, "
                    "skipping position filter"
                )

        if config.is_desk_friendly:
            unilateral = [s for s in pool if not s.bilateral]
            if unilateral:
                pool = unilateral

        if config.position != Position.ALL:
            # sorted() is stable, so this is a partition rather than a reorder
            pool = sorted(pool, key=lambda s: s.position.value != config.position.value)

        return pool

    def shuffle(self, stretches: Sequence[Stretch]) -> List[Stretch]:
        """Return a shuffled copy of the stretches."""
        shuffled = list(stretches)
        self._rng.shuffle(shuffled)
        return shuffled

    def assemble(
        self,
        config: RoutineConfig,
        candidates: Sequence[Stretch],
    ) -> List[RoutineItem]:
        """
        Greedily take candidates until the window minimum is reached (step 6).

        A transition precedes every stretch but the first when the config
        enables transitions.
        """
        min_seconds, _ = config.duration_window
        routine: List[RoutineItem] = []
        current = 0

        for stretch in candidates:
            if current >= min_seconds:
                break

            if config.transition_duration > 0 and routine:
                routine.append(
                    make_transition(f"transition-{len(routine)}", config.transition_duration)
                )
                current += config.transition_duration

            routine.append(stretch)
            current += stretch.effective_duration

        return routine

    def select(
        self,
        config: RoutineConfig,
        catalog: Sequence[Stretch],
    ) -> List[RoutineItem]:
        """
        Select the initial routine for a configuration.

        Args:
            config: Resolved routine configuration
            catalog: Full read-only catalog

        Returns:
            Ordered routine items, possibly short or empty
        """
        pool = self.candidate_pool(config, catalog)
        return self.assemble(config, self.shuffle(pool))
