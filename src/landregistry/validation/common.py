"""Built-in validators for common field formats."""

from __future__ import annotations

import re
import uuid
from datetime import date, datetime, timezone
from typing import Any

# Registry of validator functions: name -> callable(value, **params) -> str | None
# Returns an error message string on failure, None on success.
VALIDATORS: dict[str, Any] = {}

_ADDRESS_PATTERN = r"0x[0-9a-fA-F]{40}"


def register(name: str):
    """Decorator to register a validator function."""
    def decorator(fn):
        VALIDATORS[name] = fn
        return fn
    return decorator


def check(name: str, value: Any, **params: Any) -> Any:
    """Run a registered validator and raise ValueError on failure.

    Meant to be called from pydantic field validators, which turn the
    ValueError into a field-level error message.
    """
    message = VALIDATORS[name](value, **params)
    if message is not None:
        raise ValueError(message)
    return value


@register("address")
def validate_address(value: Any, **_kwargs: Any) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str) or not re.fullmatch(_ADDRESS_PATTERN, value):
        return "Must be a wallet address (0x followed by 40 hex characters)."
    return None


@register("date_string")
def validate_date_string(value: Any, **_kwargs: Any) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        return "Must be an ISO-8601 date string."
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        if "T" in text or " " in text:
            datetime.fromisoformat(text)
        else:
            date.fromisoformat(text)
    except ValueError:
        return "Must be an ISO-8601 date string."
    return None


@register("length")
def validate_length(
    value: Any, min_len: int = 0, max_len: int | None = None, **_kwargs: Any
) -> str | None:
    if value is None:
        return None
    if len(value) < min_len:
        return f"Must be at least {min_len} characters."
    if max_len is not None and len(value) > max_len:
        return f"Must be at most {max_len} characters."
    return None


@register("uuid")
def validate_uuid(value: Any, **_kwargs: Any) -> str | None:
    if value is None:
        return None
    try:
        uuid.UUID(str(value))
    except ValueError:
        return "Must be a UUID."
    return None


def parse_date_string(value: str) -> datetime:
    """Parse a string accepted by ``validate_date_string`` into a UTC datetime."""
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    if "T" in text or " " in text:
        parsed = datetime.fromisoformat(text)
    else:
        parsed = datetime.combine(date.fromisoformat(text), datetime.min.time())
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
