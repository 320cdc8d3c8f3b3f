"""
Catalog component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from impltables.domain.entities import TraitRef


@dataclass(frozen=True)
class CrateSummary:
    """Which documented traits a crate implements, and how often."""

    crate: str
    traits: tuple[TraitRef, ...]
    entry_count: int


@dataclass(frozen=True)
class TraitSummary:
    trait: TraitRef
    crate_count: int
    entry_count: int
