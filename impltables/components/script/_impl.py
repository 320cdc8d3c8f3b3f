"""
Implementor script codec.

Reads the generated per-trait script into a table literal and writes a
table back out in the generator's exact layout:

    (function() {var implementors = {};
    implementors["crate"] = ["entry","entry",];implementors["other"] = [...];

                if (window.register_implementors) {
                ...
    })()

Key behaviors:
- Crates keep their file order; a crate assigned twice keeps the last value
- String literals use JSON escapes, plus \\' which the generator may emit
- render_script(parse_script(text).table) == text for generator output
"""

from __future__ import annotations

import json
import re

from impltables.domain.entities import ImplementorEntry, ImplementorTable

from .models import ScriptDocument, ScriptFormatError

PREAMBLE = "(function() {var implementors = {};\n"

DISPATCH_FOOTER = (
    "\n"
    "\n"
    "            if (window.register_implementors) {\n"
    "                window.register_implementors(implementors);\n"
    "            } else {\n"
    "                window.pending_implementors = implementors;\n"
    "            }\n"
    "        \n"
    "})()\n"
)

_DECLARATION_RE = re.compile(r"\(function\(\)\s*\{\s*var\s+implementors\s*=\s*\{\s*\}\s*;")
_ASSIGNMENT_RE = re.compile(r'\s*implementors\[("(?:[^"\\]|\\.)*")\]\s*=\s*\[')
_STRING_RE = re.compile(r'"(?:[^"\\]|\\.)*"', re.DOTALL)
_WHITESPACE_RE = re.compile(r"\s*")
_SINGLE_QUOTE_ESCAPE_RE = re.compile(r"\\(\\|')")


def decode_string(literal: str, offset: int = 0) -> str:
    """Decode one double-quoted script string literal."""
    normalized = _SINGLE_QUOTE_ESCAPE_RE.sub(
        lambda m: "'" if m.group(1) == "'" else "\\\\", literal
    )
    try:
        value = json.loads(normalized)
    except json.JSONDecodeError as e:
        raise ScriptFormatError(f"Bad string literal: {e.msg}", offset) from e
    if not isinstance(value, str):
        raise ScriptFormatError("Expected a string literal", offset)
    return value


def encode_string(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def _skip_ws(text: str, pos: int) -> int:
    match = _WHITESPACE_RE.match(text, pos)
    return match.end() if match else pos


def _parse_array(text: str, pos: int) -> tuple[list[ImplementorEntry], int]:
    """Parse entries after an opening ``[``; return them and the offset past ``]``."""
    entries: list[ImplementorEntry] = []
    while True:
        pos = _skip_ws(text, pos)
        if pos >= len(text):
            raise ScriptFormatError("Unterminated entry list", pos)
        if text[pos] == "]":
            return entries, pos + 1

        match = _STRING_RE.match(text, pos)
        if match is None:
            raise ScriptFormatError("Expected a string entry", pos)
        entries.append(decode_string(match.group(0), pos))

        pos = _skip_ws(text, match.end())
        if pos < len(text) and text[pos] == ",":
            pos += 1
        elif pos < len(text) and text[pos] == "]":
            return entries, pos + 1
        else:
            raise ScriptFormatError("Expected ',' or ']' after entry", pos)


def parse_script(text: str) -> ScriptDocument:
    """Read an implementor script. Raises ScriptFormatError."""
    declaration = _DECLARATION_RE.search(text)
    if declaration is None:
        raise ScriptFormatError("Missing implementors declaration", 0)

    literal: dict[str, list[ImplementorEntry]] = {}
    pos = declaration.end()
    while True:
        assignment = _ASSIGNMENT_RE.match(text, pos)
        if assignment is None:
            break
        crate = decode_string(assignment.group(1), assignment.start(1))
        entries, pos = _parse_array(text, assignment.end())

        pos = _skip_ws(text, pos)
        if pos >= len(text) or text[pos] != ";":
            raise ScriptFormatError("Expected ';' after entry list", pos)
        pos += 1

        literal[crate] = entries

    footer = text[pos:]
    return ScriptDocument(
        literal=literal,
        footer=footer,
        matches_dispatch_footer="".join(footer.split()) == "".join(DISPATCH_FOOTER.split()),
    )


def render_script(table: ImplementorTable) -> str:
    """Write ``table`` in the generator's layout."""
    parts = [PREAMBLE]
    for crate in table:
        entries = "".join(f"{encode_string(e)}," for e in table.get(crate))
        parts.append(f"implementors[{encode_string(crate)}] = [{entries}];")
    parts.append(DISPATCH_FOOTER)
    return "".join(parts)
