"""
Fake settings store for testing.
"""

from core.constants import MAX_TRANSITION_DURATION, MIN_TRANSITION_DURATION


class FakeSettingsStore:
    """In-memory fake implementation of SettingsStore."""

    def __init__(self, transition_duration: int = 0):
        self._transition_duration = transition_duration
        self.writes = 0

    async def get_transition_duration(self) -> int:
        return self._transition_duration

    async def set_transition_duration(self, seconds: int) -> int:
        if not MIN_TRANSITION_DURATION <= seconds <= MAX_TRANSITION_DURATION:
            raise ValueError(f"Transition duration out of range: {seconds}")
        self._transition_duration = seconds
        self.writes += 1
        return seconds
