"""
Script component - Read and write generated implementor scripts.
"""

from ._impl import (
    DISPATCH_FOOTER,
    PREAMBLE,
    decode_string,
    encode_string,
    parse_script,
    render_script,
)
from .component import is_faithful, run_parse, run_render
from .models import (
    ParseInput,
    ParseOutput,
    ScriptDocument,
    ScriptFormatError,
    ScriptValidationError,
)

__all__ = [
    # Entry points
    "run_parse",
    "run_render",
    "is_faithful",
    # Codec
    "parse_script",
    "render_script",
    "decode_string",
    "encode_string",
    "PREAMBLE",
    "DISPATCH_FOOTER",
    # Models
    "ParseInput",
    "ParseOutput",
    "ScriptDocument",
    "ScriptFormatError",
    "ScriptValidationError",
]
