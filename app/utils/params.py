"""Lenient parsing of optional query string values."""

from __future__ import annotations

# Ids are stored as signed 64-bit integers.
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1

_TRUE_VALUES = frozenset({"1", "true", "on", "yes"})
_FALSE_VALUES = frozenset({"0", "false", "off", "no"})


def presence(value: str | None) -> str | None:
    """Return ``value`` unless it is ``None`` or blank."""

    if value is None or not value.strip():
        return None
    return value


def parse_optional_int(value: str | None) -> int | None:
    """Return ``value`` as an integer, or ``None`` when it is absent or invalid.

    Values outside the signed 64-bit range count as invalid.
    """

    value = presence(value)
    if value is None:
        return None
    try:
        parsed = int(value.strip())
    except ValueError:
        return None
    if not MIN_ID <= parsed <= MAX_ID:
        return None
    return parsed


def parse_optional_bool(value: str | None) -> bool | None:
    """Return ``value`` as a boolean, or ``None`` when it is absent or unrecognised."""

    value = presence(value)
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return None
