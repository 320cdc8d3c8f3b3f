"""
Script component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from impltables.domain.entities import ImplementorEntry, ImplementorTable

# --- Errors ---


class ScriptFormatError(ValueError):
    """Artifact text is not a well-formed implementor script."""

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(f"{message} (at offset {offset})")
        self.offset = offset


@dataclass(frozen=True)
class ScriptValidationError:
    """Parse failure reported by the shell layer."""

    code: str
    message: str
    offset: int | None = None


# --- Parsed Document ---


@dataclass(frozen=True)
class ScriptDocument:
    """Payload and trailer of one artifact."""

    literal: dict[str, list[ImplementorEntry]] = field(default_factory=dict)
    footer: str = ""
    matches_dispatch_footer: bool = False

    @property
    def table(self) -> ImplementorTable:
        return ImplementorTable.from_literal(self.literal)


# --- Input / Output Models ---


@dataclass(frozen=True)
class ParseInput:
    """Input for parsing one artifact."""

    text: str
    source: str | None = None


@dataclass(frozen=True)
class ParseOutput:
    """Output from parsing one artifact."""

    document: ScriptDocument | None
    errors: tuple[ScriptValidationError, ...]
    success: bool
    source: str | None = None
