"""
ImplementorCatalog - host-side index of delivered tables.

Tables from different artifacts stay independent: one table per trait,
replaced (not merged) when the same trait is loaded again.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from impltables.domain.entities import ImplementorTable, TraitRef

from .models import CrateSummary, TraitSummary

logger = logging.getLogger(__name__)


class ImplementorCatalog:
    """Collects one ImplementorTable per trait."""

    def __init__(self) -> None:
        self._tables: dict[TraitRef, ImplementorTable] = {}

    def add(self, trait: TraitRef, table: ImplementorTable) -> None:
        if trait in self._tables:
            logger.debug("Replacing table for %s", trait.path)
        self._tables[trait] = table

    def hook_for(self, trait: TraitRef) -> Callable[[ImplementorTable], None]:
        """A registration hook that files incoming tables under ``trait``."""

        def register_implementors(table: ImplementorTable) -> None:
            self.add(trait, table)

        return register_implementors

    def traits(self) -> list[TraitRef]:
        return sorted(self._tables, key=lambda t: t.path)

    def table_for(self, trait: TraitRef | str) -> ImplementorTable | None:
        if isinstance(trait, str):
            trait = TraitRef.parse(trait)
        return self._tables.get(trait)

    def crates(self) -> list[str]:
        names: set[str] = set()
        for table in self._tables.values():
            names.update(table.crates())
        return sorted(names)

    def traits_implemented_by(self, crate: str) -> list[TraitRef]:
        return [t for t in self.traits() if crate in self._tables[t]]

    def crate_summary(self, crate: str) -> CrateSummary:
        traits = self.traits_implemented_by(crate)
        return CrateSummary(
            crate=crate,
            traits=tuple(traits),
            entry_count=sum(len(self._tables[t].get(crate)) for t in traits),
        )

    def trait_summaries(self) -> list[TraitSummary]:
        return [
            TraitSummary(
                trait=t,
                crate_count=len(self._tables[t]),
                entry_count=self._tables[t].entry_count(),
            )
            for t in self.traits()
        ]

    def __len__(self) -> int:
        return len(self._tables)
