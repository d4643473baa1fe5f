"""Shared test fixtures for pbxfiletypes tests."""

from __future__ import annotations

from typing import Callable

import pytest

from samples import BEGIN, END, MISMATCHED_ENTRY


@pytest.fixture
def make_project(tmp_path) -> Callable[..., str]:
    """Write a project.pbxproj inside an .xcodeproj bundle; return its path."""

    def _make(text: str, bundle: str = "Sample.xcodeproj") -> str:
        bundle_dir = tmp_path / bundle
        bundle_dir.mkdir(exist_ok=True)
        path = bundle_dir / "project.pbxproj"
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        return str(path)

    return _make


@pytest.fixture
def minimal_project(make_project) -> str:
    """Only the section markers and one mismatched entry."""
    return make_project(BEGIN + MISMATCHED_ENTRY + END)
