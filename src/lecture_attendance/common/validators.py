from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_int(value: Any, field_name: str) -> int:
    """Accept ints, integral floats (JSON 3.0) and decimal strings; reject everything else."""
    error = ValidationError(f"{field_name} must be an integer")
    if isinstance(value, bool):
        raise error
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise error
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise error
    raise error
