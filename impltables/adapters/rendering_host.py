"""
In-process rendering host.

Plays the page side of the handshake: it owns the optional registration
hook and the pending slot. Implements both loader ports.

Key behaviors:
- Starts with no hook and an empty slot (both NOT_YET_AVAILABLE)
- The slot holds at most one table; each store overwrites it
- Registering a hook does not drain the slot; call take_pending()
"""

from __future__ import annotations

import logging

from impltables.components.loader import RegistrationHook
from impltables.domain.entities import (
    NOT_YET_AVAILABLE,
    ImplementorTable,
    NotYetAvailable,
)

logger = logging.getLogger(__name__)


class RenderingHost:
    """Holds the registration hook and the pending implementor slot."""

    def __init__(self, hook: RegistrationHook | None = None) -> None:
        self._hook: RegistrationHook | NotYetAvailable = (
            hook if hook is not None else NOT_YET_AVAILABLE
        )
        self._pending: ImplementorTable | NotYetAvailable = NOT_YET_AVAILABLE

    # --- RegistrationHookPort ---

    def current_hook(self) -> RegistrationHook | NotYetAvailable:
        return self._hook

    def register_hook(self, hook: RegistrationHook | None) -> None:
        if hook is None:
            self.clear_hook()
            return
        logger.info("Registration hook installed")
        self._hook = hook

    def clear_hook(self) -> None:
        self._hook = NOT_YET_AVAILABLE

    @property
    def has_hook(self) -> bool:
        return self._hook is not NOT_YET_AVAILABLE

    # --- PendingSlotPort ---

    def store(self, table: ImplementorTable) -> None:
        if self._pending is not NOT_YET_AVAILABLE:
            logger.debug("Overwriting pending table (%d crates)", len(self._pending))
        self._pending = table

    @property
    def pending(self) -> ImplementorTable | NotYetAvailable:
        return self._pending

    def take_pending(self) -> ImplementorTable | NotYetAvailable:
        """Return the parked table and empty the slot."""
        table = self._pending
        self._pending = NOT_YET_AVAILABLE
        return table
