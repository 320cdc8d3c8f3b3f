"""
Loader component - Port interfaces.

The loader never reaches into ambient state: the rendering side hands it
a hook port and a pending-slot port.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from impltables.domain.entities import ImplementorTable, NotYetAvailable

RegistrationHook = Callable[[ImplementorTable], object]


class RegistrationHookPort(Protocol):
    """Access to the rendering system's registration hook."""

    def current_hook(self) -> RegistrationHook | NotYetAvailable | None:
        """Return the registered hook, or NOT_YET_AVAILABLE (None is read the same)."""
        ...


class PendingSlotPort(Protocol):
    """Holding area for a table that arrived before the hook."""

    def store(self, table: ImplementorTable) -> None:
        """Overwrite the slot with ``table``."""
        ...
