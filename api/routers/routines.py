"""
Routine router.

This router provides endpoints for smart routine generation:
- Parse a free-text description into a partial intent
- Generate a routine from a description and explicit selections
"""

import logging
import random
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from api.deps import (
    get_catalog_repo,
    get_entitlement_provider,
    get_optional_user,
    get_settings_store,
)
from application.exceptions import CatalogLoadError, NoSuitableStretchesError
from application.ports import CatalogRepository, EntitlementProvider, SettingsStore
from models.routine import (
    GeneratedRoutine,
    GenerateRoutineRequest,
    ParsedIntent,
    ParseIntentRequest,
)
from services.intent_parser import IntentParser
from services.routine_generator import RoutineGenerator

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/routines",
    tags=["Routines"],
)

_parser = IntentParser()


def get_rng() -> Optional[random.Random]:
    """Random generator for routine shuffling; overridden with a seeded one in tests."""
    return None


def get_routine_generator(
    catalog_repo: CatalogRepository = Depends(get_catalog_repo),
    settings_store: SettingsStore = Depends(get_settings_store),
    entitlement_provider: EntitlementProvider = Depends(get_entitlement_provider),
    rng: Optional[random.Random] = Depends(get_rng),
) -> RoutineGenerator:
    """
    Create and return a RoutineGenerator instance.

    Args:
        catalog_repo: Stretch catalog
        settings_store: Persisted settings
        entitlement_provider: Premium entitlement checks
        rng: Optional seeded random generator

    Returns:
        Configured RoutineGenerator instance
    """
    return RoutineGenerator(
        catalog_repo=catalog_repo,
        settings_store=settings_store,
        entitlement_provider=entitlement_provider,
        rng=rng,
        parser=_parser,
    )


@router.post("/parse", response_model=ParsedIntent)
def parse_description(request: ParseIntentRequest) -> ParsedIntent:
    """
    Parse a free-text description.

    Returns the fields the parser recognised so the client can confirm or
    adjust them before generating. Unrecognised text returns an empty intent.
    """
    return _parser.parse(request.text)


@router.post("/generate", response_model=GeneratedRoutine)
async def generate_routine(
    request: GenerateRoutineRequest,
    user_id: Optional[str] = Depends(get_optional_user),
    generator: RoutineGenerator = Depends(get_routine_generator),
):
    """
    Generate a stretch routine.

    1. **Parsing**: The description is parsed for areas, issue, activity
       and position.

    2. **Configuration**: Explicit selections override parsed values;
       missing values get defaults.

    3. **Selection**: Stretches are filtered, shuffled and assembled
       towards the duration window, then topped up.

    4. **Sanitization**: Premium stretches are removed for non-entitled
       users and orphan transitions are dropped. A routine with a single
       stretch is augmented from a relaxed re-selection.

    Raises:
        HTTPException 422: If no suitable stretches could be selected
        HTTPException 503: If the catalog is unavailable
        HTTPException 500: If generation fails unexpectedly
    """
    logger.info(
        f"Generate routine request: duration={request.duration}, "
        f"issue={request.issue_type}, position={request.position}"
    )

    try:
        return await generator.generate(request, user_id)

    except NoSuitableStretchesError as e:
        logger.error(f"Routine generation failed: {e}")
        raise HTTPException(
            status_code=422,
            detail="No suitable stretches. Try adjusting your description or selections.",
        )
    except CatalogLoadError as e:
        logger.error(f"Stretch catalog unavailable: {e}")
        raise HTTPException(
            status_code=503,
            detail="Stretch catalog not available",
        )
    except Exception as e:
        logger.exception(f"Unexpected error during routine generation: {e}")
        raise HTTPException(
            status_code=500,
            detail="An unexpected error occurred during routine generation",
        )
