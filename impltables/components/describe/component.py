"""
Describe component - Entry display text.

Shell Layer - describes every entry of a table.
"""

from __future__ import annotations

from impltables.domain.entities import ImplementorTable

from ._impl import describe_entry
from .models import EntryDescription


def run_describe(table: ImplementorTable) -> dict[str, list[EntryDescription]]:
    """Describe each entry, grouped by crate in table order."""
    return {crate: [describe_entry(e) for e in table.get(crate)] for crate in table}
