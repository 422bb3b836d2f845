from typing import Any, Optional


def remove_null_values(d: dict) -> dict:
    return {key: value for key, value in d.items() if value is not None}


def strip_or_none(value: Optional[str]) -> Optional[str]:
    """Trim a text value, treating blank input as missing."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def coerce_text(value: Any) -> Optional[str]:
    """Convert a raw JSON scalar into text.

    Numbers are accepted for text fields (e.g. phone numbers sent as JSON
    numbers). Booleans, lists and objects are not text.

    Raises:
        TypeError: If the value cannot be read as text
    """
    if value is None or isinstance(value, str):
        return strip_or_none(value)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Expected text, got {type(value).__name__}")
    return str(value)
