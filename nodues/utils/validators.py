"""
Validation utilities
"""

from typing import Any, Iterable, Optional
from nodues.utils.exceptions import ValidationError


def validate_required(value: Any, field_name: str) -> None:
    """
    Validate required field

    Args:
        value: Value to validate
        field_name: Name of the field for error message

    Raises:
        ValidationError: If value is empty or None
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field_name} is required")


def validate_string_length(value: str, min_length: int = 1, max_length: Optional[int] = None,
                           field_name: str = "Field") -> None:
    """
    Validate string length

    Args:
        value: String to validate
        min_length: Minimum length
        max_length: Maximum length
        field_name: Name of the field for error message

    Raises:
        ValidationError: If length is invalid
    """
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")

    if len(value) < min_length:
        raise ValidationError(f"{field_name} must be at least {min_length} characters")

    if max_length and len(value) > max_length:
        raise ValidationError(f"{field_name} must be no more than {max_length} characters")


def validate_choice(value: Any, choices: Iterable[str], field_name: str = "Field") -> str:
    """
    Validate that a value is one of the allowed choices

    Args:
        value: Value to validate
        choices: Allowed values
        field_name: Name of the field for error message

    Returns:
        The validated value

    Raises:
        ValidationError: If value is not one of the choices
    """
    allowed = tuple(choices)
    if value not in allowed:
        raise ValidationError(f"{field_name} must be one of: {', '.join(allowed)}")
    return value


def validate_positive_int(value: Any, field_name: str = "Field") -> int:
    """Validate a positive integer (page numbers, page sizes)"""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValidationError(f"{field_name} must be a positive integer")
    return value
