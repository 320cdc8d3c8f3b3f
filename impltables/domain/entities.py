"""
Domain entities for implementor tables.

An artifact documents one trait. Its payload is a table mapping a library
(crate) name to the pre-rendered markup of each implementation that library
provides. Entries are opaque: nothing in this package needs to understand the
markup in order to load or deliver a table.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict

# --- Type Aliases ---

ImplementorEntry = str
TableLiteral = Mapping[str, Sequence[ImplementorEntry]]


# --- Sentinel ---


class _Availability(Enum):
    NOT_YET_AVAILABLE = "not_yet_available"

    def __repr__(self) -> str:
        return "NOT_YET_AVAILABLE"


NOT_YET_AVAILABLE = _Availability.NOT_YET_AVAILABLE
NotYetAvailable = Literal[_Availability.NOT_YET_AVAILABLE]


# --- Trait Reference ---


class TraitRef(BaseModel):
    """Fully qualified trait path, e.g. ``core::ops::Drop``."""

    model_config = ConfigDict(frozen=True)

    module_path: tuple[str, ...]
    name: str

    @property
    def path(self) -> str:
        return "::".join((*self.module_path, self.name))

    @classmethod
    def parse(cls, path: str) -> TraitRef:
        parts = [p for p in path.strip().split("::") if p]
        if not parts:
            raise ValueError(f"Empty trait path: {path!r}")
        return cls(module_path=tuple(parts[:-1]), name=parts[-1])

    def __str__(self) -> str:
        return self.path


# --- Implementor Table ---


@dataclass(frozen=True, eq=True)
class ImplementorTable:
    """
    Crate name -> ordered entries.

    Equality ignores crate order; iteration keeps it so that a table can be
    rendered back in the order it was read.
    """

    entries: dict[str, tuple[ImplementorEntry, ...]] = field(default_factory=dict)

    # Entries live in a dict, so tables are unhashable
    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def from_literal(cls, literal: TableLiteral) -> ImplementorTable:
        entries: dict[str, tuple[ImplementorEntry, ...]] = {}
        for crate, values in literal.items():
            if isinstance(values, str):
                raise TypeError(
                    f"Entries for {crate!r} must be a sequence of strings, not a str"
                )
            entries[str(crate)] = tuple(values)
        return cls(entries=entries)

    def crates(self) -> list[str]:
        return list(self.entries)

    def get(self, crate: str) -> tuple[ImplementorEntry, ...]:
        return self.entries.get(crate, ())

    def entry_count(self) -> int:
        return sum(len(v) for v in self.entries.values())

    def to_dict(self) -> dict[str, list[ImplementorEntry]]:
        """Fresh plain-dict copy, safe for callers to mutate."""
        return {k: list(v) for k, v in self.entries.items()}

    def __contains__(self, crate: object) -> bool:
        return crate in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
