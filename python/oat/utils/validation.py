"""
Input validation utilities for oat.
"""

from typing import FrozenSet, Optional


def validate_length(length: int) -> bool:
    """
    Validate password length.

    Args:
        length: Requested password length

    Returns:
        True if length is valid, False otherwise
    """
    return isinstance(length, int) and length > 0


def validate_count(count: int) -> bool:
    """Validate number of passwords to generate."""
    return isinstance(count, int) and count > 0


def get_validation_error_message(length: int, count: int) -> Optional[str]:
    """
    Get a descriptive error message for invalid length or count.

    Args:
        length: Requested password length
        count: Requested number of passwords

    Returns:
        Error message, or None if both values are valid
    """
    if not validate_length(length):
        return "Password length must be greater than 0"

    if not validate_count(count):
        return "Password count must be greater than 0"

    return None


def split_chars(value: Optional[str]) -> FrozenSet[str]:
    """Split an option string into its individual characters."""
    if not value:
        return frozenset()
    return frozenset(value)
