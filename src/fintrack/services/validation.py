"""Shared input checks for named resources."""

from fintrack.core.exceptions import ValidationError

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100


def clean_name(value: str, label: str) -> str:
    """Trim a display name and enforce its length bounds."""
    name = (value or "").strip()
    if len(name) < NAME_MIN_LENGTH:
        raise ValidationError(f"{label} name must be at least {NAME_MIN_LENGTH} characters")
    if len(name) > NAME_MAX_LENGTH:
        raise ValidationError(f"{label} name must be at most {NAME_MAX_LENGTH} characters")
    return name
