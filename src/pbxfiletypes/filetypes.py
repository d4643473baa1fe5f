"""Source file type table: Xcode type identifiers and their extensions."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

C_HEADER_TYPE = "sourcecode.c.h"
CPP_HEADER_TYPE = "sourcecode.cpp.h"

FILE_TYPE_EXTENSIONS: Mapping[str, str] = MappingProxyType({
    "sourcecode.c.c": "c",
    C_HEADER_TYPE: "h",
    "sourcecode.c.objc": "m",
    "sourcecode.cpp.cpp": "cpp",
    CPP_HEADER_TYPE: "hpp",
    "sourcecode.cpp.objcpp": "mm",
    "sourcecode.exports": "exp",
    "sourcecode.javascript": "js",
    "sourcecode.make": "make",
    "sourcecode.mig": "defs",
    "sourcecode.yacc": "y",
})


def _invert(table: Mapping[str, str]) -> Mapping[str, str]:
    """Build extension -> type. ".h" always resolves to the plain C header.

    C and C++ headers share ".h" in practice; nothing on a single entry line
    says which one was meant, so the C header wins.
    """
    inverted: dict[str, str] = {}
    for file_type, extension in table.items():
        inverted.setdefault(extension, file_type)
    inverted["h"] = C_HEADER_TYPE
    return MappingProxyType(inverted)


EXTENSION_FILE_TYPES: Mapping[str, str] = _invert(FILE_TYPE_EXTENSIONS)


def extension_of(path: str) -> str:
    """Lowercase extension of the path's basename, without the dot.

    '"Foo Bar.CPP"'     -> "cpp"
    "dir/archive.tar.gz" -> "gz"
    "Makefile"           -> ""
    """
    name = path.strip().strip('"').rsplit("/", 1)[-1]
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1].lower()


def is_known_type(file_type: str) -> bool:
    return file_type in FILE_TYPE_EXTENSIONS


def expected_extension(file_type: str) -> str | None:
    return FILE_TYPE_EXTENSIONS.get(file_type)


def file_type_for(extension: str) -> str | None:
    """Type to declare for a file with this extension, if any."""
    return EXTENSION_FILE_TYPES.get(extension.lower())
