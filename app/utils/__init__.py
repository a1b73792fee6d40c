"""Utility helpers for reusable functionality."""

from .datetime import ensure_app_timezone, get_app_timezone, now_in_utc_naive_datetime
from .params import MAX_ID, MIN_ID, parse_optional_bool, parse_optional_int, presence

__all__ = [
    "MAX_ID",
    "MIN_ID",
    "ensure_app_timezone",
    "get_app_timezone",
    "now_in_utc_naive_datetime",
    "parse_optional_bool",
    "parse_optional_int",
    "presence",
]
