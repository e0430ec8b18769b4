from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Entity(BaseModel):
    """Fields shared by everything a registry holds.

    ``signal_strength`` and ``last_seen`` are the volatile discovery fields a
    repeated sighting refreshes.
    """

    model_config = {"extra": "forbid"}

    id: str = Field(min_length=1)
    name: str
    signal_strength: int = Field(default=0, ge=0, le=100)
    last_seen: datetime = Field(default_factory=utcnow)
