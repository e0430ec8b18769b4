from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel

ALL_CATEGORIES = "all"


class InventoryFilter(BaseModel):
    """Text and category selection applied by ``list_entities``."""

    model_config = {"frozen": True, "extra": "forbid"}

    text: str | None = None
    category: str | None = None

    @property
    def needle(self) -> str:
        return (self.text or "").lower()

    @property
    def wants_every_category(self) -> bool:
        return self.category is None or self.category == ALL_CATEGORIES


def matches_text(fields: Iterable[str | None], needle: str) -> bool:
    if not needle:
        return True
    return any(needle in field.lower() for field in fields if field)


def matches(
    fields: Iterable[str | None], category: str, query: InventoryFilter
) -> bool:
    if not query.wants_every_category and category != query.category:
        return False
    return matches_text(fields, query.needle)
