"""
Input sanitization utilities.

Shared sanitization for free-text routine descriptions before they reach
the intent parser or are echoed back in the routine summary.
This module has no dependencies on models or services to avoid circular imports.
"""

import re

from core.constants import MAX_DESCRIPTION_LENGTH


def sanitize_user_input(value: str, max_length: int = MAX_DESCRIPTION_LENGTH) -> str:
    """
    Sanitize user input by removing control characters and limiting length.

    - Replaces newlines, carriage returns, tabs, and control characters with spaces
    - Collapses multiple spaces into one
    - Strips leading/trailing whitespace
    - Truncates to a maximum length

    Args:
        value: Raw user-provided string
        max_length: Maximum allowed length (default: MAX_DESCRIPTION_LENGTH)

    Returns:
        Sanitized string
    """
    sanitized = re.sub(r"[\n\r\t\x00-\x1f\x7f-\x9f]", " ", value)
    sanitized = re.sub(r" +", " ", sanitized)
    sanitized = sanitized.strip()
    return sanitized[:max_length]
