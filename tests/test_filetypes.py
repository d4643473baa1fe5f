"""Tests for the type/extension table and extension derivation."""

from __future__ import annotations

import pytest

from pbxfiletypes.filetypes import (
    C_HEADER_TYPE,
    CPP_HEADER_TYPE,
    EXTENSION_FILE_TYPES,
    FILE_TYPE_EXTENSIONS,
    expected_extension,
    extension_of,
    file_type_for,
    is_known_type,
)


@pytest.mark.parametrize("file_type,extension", sorted(FILE_TYPE_EXTENSIONS.items()))
def test_table_pairs_agree(file_type, extension):
    """Every declared pair checks clean against a path with that extension."""
    assert expected_extension(file_type) == extension_of(f"Sources/File.{extension}")


def test_h_resolves_to_c_header():
    assert file_type_for("h") == C_HEADER_TYPE
    assert file_type_for("H") == C_HEADER_TYPE


def test_cpp_header_is_not_an_h_type():
    assert expected_extension(CPP_HEADER_TYPE) != "h"
    assert file_type_for("hpp") == CPP_HEADER_TYPE


def test_reverse_table_covers_every_extension():
    assert set(EXTENSION_FILE_TYPES) == set(FILE_TYPE_EXTENSIONS.values())


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        FILE_TYPE_EXTENSIONS["sourcecode.swift"] = "swift"  # type: ignore[index]
    with pytest.raises(TypeError):
        EXTENSION_FILE_TYPES["swift"] = "sourcecode.swift"  # type: ignore[index]


def test_unknown_type():
    assert not is_known_type("sourcecode.unknown")
    assert expected_extension("sourcecode.unknown") is None
    assert is_known_type("sourcecode.c.objc")


def test_unknown_extension_has_no_type():
    assert file_type_for("txt") is None
    assert file_type_for("") is None


@pytest.mark.parametrize("path,extension", [
    ("Foo.h", "h"),
    ("Foo.CPP", "cpp"),
    ('"Foo Bar.mm"', "mm"),
    ("platform/mac/Thing.m", "m"),
    ("archive.tar.gz", "gz"),
    ("some.dir/Makefile", ""),
    ("GNUmakefile", ""),
])
def test_extension_of(path, extension):
    assert extension_of(path) == extension
