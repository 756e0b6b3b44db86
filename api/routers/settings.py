"""
Settings router for routine preferences.

Provides GET/PUT endpoints for the persisted transition duration, the pause
inserted between stretches of generated routines.

NOTE: Settings are application-wide (not per-user).
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.deps import get_settings_store
from application.ports import SettingsStore
from models.routine import TransitionDurationSetting

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/settings",
    tags=["Settings"],
)


@router.get(
    "/transition-duration",
    response_model=TransitionDurationSetting,
    summary="Get the transition duration",
)
async def get_transition_duration(
    settings_store: SettingsStore = Depends(get_settings_store),
) -> TransitionDurationSetting:
    """
    Get the seconds inserted between stretches (0 means no transitions).

    Raises:
        HTTPException: If the settings file cannot be read (500 error)
    """
    try:
        seconds = await settings_store.get_transition_duration()
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load transition duration: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to load settings: {str(e)}",
        ) from e
    return TransitionDurationSetting(transition_duration=seconds)


@router.put(
    "/transition-duration",
    response_model=TransitionDurationSetting,
    summary="Update the transition duration",
)
async def update_transition_duration(
    setting: TransitionDurationSetting,
    settings_store: SettingsStore = Depends(get_settings_store),
) -> TransitionDurationSetting:
    """
    Persist the seconds inserted between stretches.

    Raises:
        HTTPException: If the settings file cannot be written (500 error)
    """
    try:
        seconds = await settings_store.set_transition_duration(setting.transition_duration)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to save transition duration: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to save settings: {str(e)}",
        ) from e
    return TransitionDurationSetting(transition_duration=seconds)
