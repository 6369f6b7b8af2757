from __future__ import annotations

from numbers import Real

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_number(value, field_name: str, *, default: float | None = None) -> float:
    if value is None:
        if default is None:
            raise ValidationError(f"{field_name} is required")
        return float(default)
    # bool is a Real subclass, reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (Real, str)):
        raise ValidationError(f"{field_name} must be a number")
    try:
        return float(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a number") from None
