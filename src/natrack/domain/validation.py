"""Normalization and validation rules for session fields."""

import math

from natrack.domain.sessions import ALLOWED_TYPES, DEFAULT_TYPE


def normalize_type(value: str | None) -> str:
    """Lowercase and trim an activity type, defaulting to swim when empty."""
    if value is None:
        return DEFAULT_TYPE
    cleaned = str(value).strip().lower()
    return cleaned or DEFAULT_TYPE


def is_valid_type(value: str) -> bool:
    """Return True when the normalized type is a known activity."""
    return value in ALLOWED_TYPES


def parse_distance(value: object) -> float | None:
    """Convert a distance to a float, or return None when it is not usable."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        distance = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not math.isfinite(distance) or distance <= 0:
        return None
    return distance


def is_valid_distance(value: object) -> bool:
    """Return True when the value is a finite number strictly above zero."""
    return parse_distance(value) is not None


def is_valid_date(value: str | None) -> bool:
    """Return True when a date was supplied; the format is not checked."""
    return value is not None and bool(str(value).strip())
