"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
"""


class RoutineGenerationError(Exception):
    """Error during routine generation."""

    pass


class NoSuitableStretchesError(RoutineGenerationError):
    """No eligible stretch survived filtering and augmentation.

    This is the only failure routine generation surfaces to callers. It is
    fatal for the request and is not retried; callers should ask the user
    to adjust their description or selections.
    """

    def __init__(self, message: str = "No suitable stretches"):
        super().__init__(message)


class CatalogLoadError(Exception):
    """The stretch catalog asset is missing or malformed."""

    pass
