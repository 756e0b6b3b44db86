"""
Routine generator service.

This service orchestrates smart routine generation:
1. Boundary reads - persisted transition duration and premium entitlement
2. Intent parsing - free-text description to a partial intent
3. Config building - intent plus explicit selections to a RoutineConfig
4. Selection and post-processing - stretch selector, variety, top-up
5. Sanitization - premium filtering, low-yield augmentation, orphan removal

Everything after step 1 is synchronous, in-memory computation.
"""

import logging
import random
from typing import List, Optional, Sequence

from application.exceptions import NoSuitableStretchesError
from application.ports import CatalogRepository, EntitlementProvider, SettingsStore
from core.constants import MAX_AUGMENT_ITEMS, MAX_AUGMENT_RETRIES
from models.routine import (
    GeneratedRoutine,
    GenerateRoutineRequest,
    RoutineConfig,
    RoutineSummary,
)
from models.stretch import RoutineItem, Stretch
from services.config_builder import build_routine_config
from services.intent_parser import IntentParser
from services.post_processor import (
    enforce_variety,
    ensure_minimum_stretches,
    fill_to_target,
    routine_duration,
)
from services.routine_sanitizer import (
    count_stretches,
    filter_premium,
    remove_orphan_transitions,
)
from services.stretch_selector import StretchSelector, make_transition

logger = logging.getLogger(__name__)


class RoutineGenerator:
    """
    Service for generating stretch routines.

    Collaborators are injected as ports so tests can substitute fakes, and
    the random generator can be seeded for reproducible routines.
    """

    def __init__(
        self,
        catalog_repo: CatalogRepository,
        settings_store: SettingsStore,
        entitlement_provider: EntitlementProvider,
        rng: Optional[random.Random] = None,
        parser: Optional[IntentParser] = None,
    ):
        """
        Initialize the routine generator.

        Args:
            catalog_repo: Read-only stretch catalog
            settings_store: Persisted settings (transition duration)
            entitlement_provider: Premium entitlement checks
            rng: Random generator for shuffling (unseeded if omitted)
            parser: Intent parser (a fresh one if omitted)
        """
        self._catalog_repo = catalog_repo
        self._settings_store = settings_store
        self._entitlements = entitlement_provider
        self._selector = StretchSelector(rng)
        self._parser = parser or IntentParser()

    async def generate(
        self,
        request: GenerateRoutineRequest,
        user_id: Optional[str] = None,
    ) -> GeneratedRoutine:
        """
        Generate a routine for a request.

        Args:
            request: Description and explicit selections
            user_id: The requesting user, None for anonymous requests

        Returns:
            Finished routine with its display summary

        Raises:
            NoSuitableStretchesError: If no eligible stretch could be selected
            CatalogLoadError: If the catalog cannot be loaded
        """
        transition_duration = await self._settings_store.get_transition_duration()
        has_premium_access = await self._entitlements.has_premium_access(user_id)

        intent = self._parser.parse(request.description)
        config = build_routine_config(
            intent,
            issue_type=request.issue_type,
            position=request.position,
            duration=request.duration,
            transition_duration=transition_duration,
            has_premium_access=has_premium_access,
            desk_friendly=request.desk_friendly,
            areas=request.areas,
        )

        items = self.build_routine(config, self._catalog_repo.get_all())
        total = routine_duration(items)
        stretch_count = count_stretches(items)
        logger.info(
            f"Generated routine for user {user_id or 'anonymous'}: "
            f"{stretch_count} stretches, {len(items)} items, {total}s"
        )

        return GeneratedRoutine(
            items=items,
            summary=RoutineSummary(
                description=request.description,
                issue_type=config.issue_type,
                duration=config.duration,
                area=config.areas[0],
                transition_duration=config.transition_duration,
            ),
            stretch_count=stretch_count,
            total_duration=total,
        )

    def build_routine(
        self,
        config: RoutineConfig,
        catalog: Sequence[Stretch],
    ) -> List[RoutineItem]:
        """
        Run the synchronous pipeline for a resolved config.

        Args:
            config: Resolved routine configuration
            catalog: Full read-only catalog

        Returns:
            Sanitized routine with at least one stretch

        Raises:
            NoSuitableStretchesError: If no eligible stretch survives filtering
        """
        routine = filter_premium(self.select_and_process(config, catalog), config.has_premium_access)

        stretch_count = count_stretches(routine)
        if stretch_count == 0:
            logger.error(
                f"No suitable stretches for areas {[a.value for a in config.areas]} "
                f"in position {config.position.value}"
            )
            raise NoSuitableStretchesError()

        if stretch_count == 1:
            routine = self.augment(routine, config, catalog)

        return remove_orphan_transitions(routine)

    def select_and_process(
        self,
        config: RoutineConfig,
        catalog: Sequence[Stretch],
    ) -> List[RoutineItem]:
        """Select the initial routine and apply variety and duration post-processing."""
        pool = self._selector.candidate_pool(config, catalog)
        routine = self._selector.assemble(config, self._selector.shuffle(pool))
        _, max_seconds = config.duration_window

        routine = enforce_variety(routine, pool)
        routine = ensure_minimum_stretches(
            routine,
            pool,
            config.transition_duration,
            max_seconds,
            rng=self._selector.rng,
        )
        return fill_to_target(
            routine,
            pool,
            max_seconds,
            config.transition_duration,
            rng=self._selector.rng,
        )

    def augment(
        self,
        routine: Sequence[RoutineItem],
        config: RoutineConfig,
        catalog: Sequence[Stretch],
    ) -> List[RoutineItem]:
        """
        Extend a single-stretch routine with a relaxed re-selection.

        The selection is rerun with transitions disabled to favour stretch
        count over pacing. Up to MAX_AUGMENT_ITEMS stretches of that run are
        appended after the original stretch, with fresh transitions at the
        originally requested duration in between.

        Args:
            routine: Premium-filtered routine holding exactly one stretch
            config: The original configuration
            catalog: Full read-only catalog

        Returns:
            Augmented routine (not yet orphan-sanitized)
        """
        logger.warning("Only one stretch was selected, adding related stretches")
        original = next(item for item in routine if isinstance(item, Stretch))
        relaxed = config.without_transitions()

        extras: List[Stretch] = []
        for _ in range(MAX_AUGMENT_RETRIES):
            extras = [
                item
                for item in self.select_and_process(relaxed, catalog)
                if isinstance(item, Stretch)
                and item.has_demo
                and (config.has_premium_access or not item.premium)
            ][:MAX_AUGMENT_ITEMS]
            if extras:
                break

        augmented: List[RoutineItem] = [original]
        for index, stretch in enumerate(extras):
            if config.transition_duration > 0:
                augmented.append(make_transition(f"transition-{index}", config.transition_duration))
            augmented.append(stretch)

        logger.info(f"Augmented routine with {len(extras)} additional stretches")
        return augmented
