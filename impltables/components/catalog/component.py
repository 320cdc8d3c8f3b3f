"""
Catalog component - Loading a set of artifacts into one catalog.

Shell Layer - drives the loader once per trait with the catalog as hook.
"""

from __future__ import annotations

from collections.abc import Iterable

from impltables.components.loader import LoadInput, LoadOutput, RegistrationHook, run_load
from impltables.domain.entities import ImplementorTable, TableLiteral, TraitRef

from ._impl import ImplementorCatalog


class _CatalogPorts:
    """Hook and slot ports that both file tables under one trait."""

    def __init__(self, catalog: ImplementorCatalog, trait: TraitRef) -> None:
        self._catalog = catalog
        self._trait = trait

    def current_hook(self) -> RegistrationHook:
        return self._catalog.hook_for(self._trait)

    def store(self, table: ImplementorTable) -> None:
        self._catalog.add(self._trait, table)


def run_catalog(
    artifacts: Iterable[tuple[TraitRef, TableLiteral]],
    catalog: ImplementorCatalog | None = None,
) -> tuple[ImplementorCatalog, list[LoadOutput]]:
    """Load every (trait, literal) pair into ``catalog``."""
    catalog = catalog if catalog is not None else ImplementorCatalog()
    outputs = []
    for trait, literal in artifacts:
        ports = _CatalogPorts(catalog, trait)
        outputs.append(run_load(LoadInput(literal=literal, trait=trait), ports, ports))
    return catalog, outputs
