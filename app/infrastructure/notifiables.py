"""Registry of the object types notifications can refer to."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import lru_cache
from typing import Any

from app.config import get_settings
from app.domain.entities import DetailsRenderer, NotifiableType


class NotifiableRegistry:
    """Ordered, static list of notifiable types.

    Iteration order is the configured order and determines the order of the
    per-type summaries returned to clients.
    """

    def __init__(self, types: Iterable[NotifiableType]) -> None:
        self._types: dict[str, NotifiableType] = {}
        for notifiable_type in types:
            if notifiable_type.key in self._types:
                raise ValueError(f"Duplicate notifiable type '{notifiable_type.key}'")
            self._types[notifiable_type.key] = notifiable_type

    @classmethod
    def from_keys(cls, keys: Iterable[str]) -> "NotifiableRegistry":
        return cls(NotifiableType(key=key) for key in keys)

    def __iter__(self) -> Iterator[NotifiableType]:
        return iter(self._types.values())

    def __contains__(self, key: object) -> bool:
        return key in self._types

    def keys(self) -> list[str]:
        return list(self._types)

    def register_renderer(self, key: str, renderer: DetailsRenderer) -> None:
        """Attach a details renderer to an already registered type."""

        if key not in self._types:
            raise KeyError(key)
        self._types[key] = NotifiableType(key=key, renderer=renderer)

    def render(
        self,
        notifiable_type: str,
        notifiable_id: int,
        details: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return the client-facing details of a notification target.

        Types without a renderer expose the details stored with the
        notification unchanged.
        """

        stored = dict(details or {})
        entry = self._types.get(notifiable_type)
        if entry is None or entry.renderer is None:
            return stored
        return {**stored, **entry.renderer(notifiable_id, stored)}


@lru_cache
def get_notifiable_registry() -> NotifiableRegistry:
    """Return the registry built from the configured notifiable types."""

    return NotifiableRegistry.from_keys(get_settings().notifiable_types)


__all__ = ["NotifiableRegistry", "get_notifiable_registry"]
