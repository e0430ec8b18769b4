from __future__ import annotations


class HomehubError(Exception):
    """Base class for homehub errors."""


class ScanError(HomehubError):
    """A discovery transport failed before producing candidates."""


class InventoryError(HomehubError, ValueError):
    """Inventory contents violate a registry invariant."""
