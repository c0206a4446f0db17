from __future__ import annotations

import re
from typing import Any, Iterable, Optional

from ..core.exceptions import ValidationError

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_choice(value: str, field_name: str, choices: Iterable[str]) -> str:
    value = require_non_empty(value, field_name)
    allowed = tuple(choices)
    if value not in allowed:
        raise ValidationError(f"{field_name} must be one of: {', '.join(allowed)}")
    return value


def require_pattern(value: str, field_name: str, pattern: Optional[str]) -> str:
    value = require_non_empty(value, field_name)
    if pattern and not re.fullmatch(pattern, value):
        raise ValidationError(f"{field_name} has an invalid format")
    return value


def optional_email(value: Any, field_name: str = "email") -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    value = value.strip()
    if not value:
        return None
    if not EMAIL_RE.match(value):
        raise ValidationError(f"{field_name} is not a valid email address")
    return value


def require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a boolean")
    return value
