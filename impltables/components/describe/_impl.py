"""
Entry description - markup to display text.

Used for listings only. Loading and delivering tables never looks inside an
entry; this turns one into text a terminal can show.
"""

from __future__ import annotations

from html.parser import HTMLParser

from .models import EntryDescription, LinkedItem


class _EntryParser(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.text: list[str] = []
        self.links: list[LinkedItem] = []
        self.where: list[str] | None = None
        self._anchor: dict[str, str | None] | None = None
        self._anchor_text: list[str] = []
        self._span_depth = 0
        self._where_depth: int | None = None

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        attributes = dict(attrs)
        if tag == "a":
            self._anchor = attributes
            self._anchor_text = []
        elif tag == "span":
            self._span_depth += 1
            if attributes.get("class") == "where" and self._where_depth is None:
                self._where_depth = self._span_depth
                self.where = []

    def handle_endtag(self, tag: str) -> None:
        if tag == "a" and self._anchor is not None:
            self.links.append(
                LinkedItem(
                    kind=self._anchor.get("class") or "link",
                    label="".join(self._anchor_text),
                    qualified_path=self._anchor.get("title"),
                    href=self._anchor.get("href"),
                )
            )
            self._anchor = None
        elif tag == "span":
            if self._where_depth == self._span_depth:
                self._where_depth = None
            self._span_depth -= 1

    def handle_data(self, data: str) -> None:
        self.text.append(data)
        if self._anchor is not None:
            self._anchor_text.append(data)
        if self._where_depth is not None and self.where is not None:
            self.where.append(data)


def describe_entry(entry: str) -> EntryDescription:
    parser = _EntryParser()
    parser.feed(entry)
    parser.close()

    text = " ".join("".join(parser.text).split())
    where = " ".join("".join(parser.where).split()) if parser.where is not None else None
    return EntryDescription(text=text, links=tuple(parser.links), where_clause=where)
