"""
ImplementorLoader - build a table and deliver it through exactly one channel.

Key behaviors:
- Every load builds a brand-new table from the literal; nothing is shared
  with earlier loads or with the literal itself.
- If the hook is registered it is called once with the table, otherwise the
  pending slot is overwritten with it. Never both, never neither.
- Exceptions raised by the hook propagate unchanged.
"""

from __future__ import annotations

import logging

from impltables.domain.entities import (
    NOT_YET_AVAILABLE,
    ImplementorTable,
    NotYetAvailable,
    TableLiteral,
    TraitRef,
)

from .models import DeliveryChannel, LoadOutput
from .ports import PendingSlotPort, RegistrationHook, RegistrationHookPort

logger = logging.getLogger(__name__)


def build_table(literal: TableLiteral) -> ImplementorTable:
    """Copy ``literal`` into a fresh table. Entries are kept verbatim."""
    return ImplementorTable.from_literal(literal)


def select_channel(hook: RegistrationHook | NotYetAvailable | None) -> DeliveryChannel:
    """A missing hook, NOT_YET_AVAILABLE or None, selects the pending slot."""
    if hook is None or hook is NOT_YET_AVAILABLE:
        return DeliveryChannel.PENDING
    return DeliveryChannel.HOOK


class ImplementorLoader:
    """Run-once-per-artifact loader bound to a hook port and a pending slot."""

    def __init__(
        self,
        hooks: RegistrationHookPort,
        pending: PendingSlotPort,
    ) -> None:
        self._hooks = hooks
        self._pending = pending

    def load(
        self,
        literal: TableLiteral,
        trait: TraitRef | None = None,
    ) -> LoadOutput:
        table = build_table(literal)
        hook = self._hooks.current_hook()
        channel = select_channel(hook)

        label = trait.path if trait is not None else "<anonymous>"
        if hook is None or hook is NOT_YET_AVAILABLE:
            logger.debug("No hook registered, parking %s in pending slot", label)
            self._pending.store(table)
        else:
            logger.debug("Delivering %s to registration hook", label)
            hook(table)

        return LoadOutput(table=table, channel=channel, trait=trait)
