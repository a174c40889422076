"""
Custom exceptions for oat.
"""


class OatException(Exception):
    """Base exception for oat."""

    pass


class ValidationError(OatException):
    """Password constraints cannot be satisfied."""

    pass


class InvalidSpecError(ValidationError):
    """Password length or count is out of range."""

    pass


class EmptyAlphabetError(ValidationError):
    """No characters survived charset construction."""

    def __init__(self, message: str = "No characters available for password generation. "
                                      "Check your exclusion rules."):
        super().__init__(message)


class NoUsableCategoryError(ValidationError):
    """No enabled character category survived and nothing was included manually."""

    def __init__(self, message: str = "No valid characters available for password generation"):
        super().__init__(message)
