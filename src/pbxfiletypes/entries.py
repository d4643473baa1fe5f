"""Entry lines: the PBXFileReference pattern and the type clause rewrite.

A file reference in the section looks like:

    1A2B3C4D5E6F7A8B9C0D1E2F /* Foo.h */ = {isa = PBXFileReference; \
explicitFileType = sourcecode.cpp.h; path = Foo.h; sourceTree = "<group>"; };

Attributes may come in any order inside the braces, so the type clause and
the path are each picked up by a lookahead anchored after the opening brace.
"""

from __future__ import annotations

import re

from pbxfiletypes.config import SOURCE_TYPE_PREFIX
from pbxfiletypes.models import Entry

ENTRY_PATTERN = re.compile(
    r"^\s*(?P<identifier>[A-Z0-9]{24}) /\* (?P<name>.*?) \*/ = \{"
    r"(?=.*?(?P<clause>\bexplicitFileType = "
    r"(?P<file_type>" + re.escape(SOURCE_TYPE_PREFIX) + r"[^;\s]*);))"
    r"(?=.*?\bpath = (?P<path>[^;]+);)"
)


def parse_entry(line: str) -> Entry | None:
    """Parse one project file line. None when it is not a typed source entry."""
    m = ENTRY_PATTERN.match(line)
    if not m:
        return None
    return Entry(
        identifier=m.group("identifier"),
        name=m.group("name"),
        file_type=m.group("file_type"),
        path=m.group("path"),
        clause_span=m.span("clause"),
    )


def rewrite_clause(line: str, entry: Entry, new_type: str) -> str:
    """Replace the entry's explicitFileType clause with lastKnownFileType.

    Only the clause changes; whitespace, the other attributes and the line
    terminator are kept as they were.
    """
    start, end = entry.clause_span
    return f"{line[:start]}lastKnownFileType = {new_type};{line[end:]}"
