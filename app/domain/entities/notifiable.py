"""Domain entity describing a notifiable object type."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

DetailsRenderer = Callable[[int, dict[str, Any]], dict[str, Any]]


@dataclass(frozen=True)
class NotifiableType:
    """Object type notifications can refer to, keyed by its morph alias."""

    key: str
    renderer: DetailsRenderer | None = None


__all__ = ["DetailsRenderer", "NotifiableType"]
