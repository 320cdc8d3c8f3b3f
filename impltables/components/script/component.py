"""
Script component - Artifact parsing and rendering.

Shell Layer - converts parse failures into output models.
"""

from __future__ import annotations

import logging

from impltables.domain.entities import ImplementorTable

from ._impl import parse_script, render_script
from .models import ParseInput, ParseOutput, ScriptFormatError, ScriptValidationError

logger = logging.getLogger(__name__)


def run_parse(input_data: ParseInput) -> ParseOutput:
    """Parse one artifact."""
    try:
        document = parse_script(input_data.text)
    except ScriptFormatError as e:
        logger.warning("Could not parse %s: %s", input_data.source or "<text>", e)
        return ParseOutput(
            document=None,
            errors=(
                ScriptValidationError(
                    code="script_malformed",
                    message=str(e),
                    offset=e.offset,
                ),
            ),
            success=False,
            source=input_data.source,
        )

    if not document.matches_dispatch_footer:
        logger.info("%s has a non-standard trailer", input_data.source or "<text>")

    return ParseOutput(
        document=document,
        errors=(),
        success=True,
        source=input_data.source,
    )


def run_render(table: ImplementorTable) -> str:
    """Render one table as an artifact."""
    return render_script(table)


def is_faithful(text: str) -> bool:
    """True if ``text`` re-renders byte for byte."""
    try:
        document = parse_script(text)
    except ScriptFormatError:
        return False
    return render_script(document.table) == text
