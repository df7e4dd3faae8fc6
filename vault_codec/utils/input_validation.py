"""
Input contract checks shared by codec operations.
"""

from typing import Any

from ..errors import InvalidInputError


def validate_text(value: Any, max_length: int, field_name: str = "plaintext") -> str:
    """
    Check that a value is a non-empty string within the size cap.

    Emptiness is judged after trimming whitespace; the untrimmed value is
    returned so callers decide what to trim.

    Args:
        value: Value supplied by the caller
        max_length: Maximum length in characters
        field_name: Name used in the error message

    Returns:
        The value unchanged

    Raises:
        InvalidInputError: If the value is not a string, is blank, or is too long
    """
    if not isinstance(value, str):
        raise InvalidInputError(f"{field_name} must be a string, got {type(value).__name__}")
    if not value.strip():
        raise InvalidInputError(f"{field_name} must not be empty")
    if len(value) > max_length:
        raise InvalidInputError(
            f"{field_name} is too long ({len(value)} characters, max {max_length})"
        )
    return value


def is_valid_text(value: Any, max_length: int) -> bool:
    """Non-raising variant of validate_text."""
    return isinstance(value, str) and bool(value) and len(value) <= max_length
