"""
Loader component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from impltables.domain.entities import ImplementorTable, TableLiteral, TraitRef


class DeliveryChannel(str, Enum):
    """Where a freshly built table went."""

    HOOK = "hook"
    PENDING = "pending"


# --- Input Models ---


@dataclass(frozen=True)
class LoadInput:
    """Input for a single load."""

    literal: TableLiteral
    trait: TraitRef | None = None


# --- Output Models ---


@dataclass(frozen=True)
class LoadOutput:
    """Result of a single load."""

    table: ImplementorTable
    channel: DeliveryChannel
    trait: TraitRef | None = None

    @property
    def delivered_to_hook(self) -> bool:
        return self.channel is DeliveryChannel.HOOK
