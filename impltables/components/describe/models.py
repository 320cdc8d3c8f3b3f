"""
Describe component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkedItem:
    """An item linked from an entry (trait, struct, primitive, ...)."""

    kind: str
    label: str
    qualified_path: str | None = None
    href: str | None = None


@dataclass(frozen=True)
class EntryDescription:
    """Plain-text view of one implementor entry."""

    text: str
    links: tuple[LinkedItem, ...]
    where_clause: str | None = None

    @property
    def implementing_type(self) -> str | None:
        """Text after ``for``, up to any where clause."""
        _, sep, tail = self.text.partition(" for ")
        if not sep:
            return None
        head = tail.split(" where ", 1)[0].strip()
        return head or None

    def qualified_paths(self) -> list[str]:
        return [link.qualified_path for link in self.links if link.qualified_path]
