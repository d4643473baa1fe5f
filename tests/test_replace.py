"""Tests for temp-file-then-rename replacement: the original survives failures."""

from __future__ import annotations

import pytest

from pbxfiletypes import replace
from pbxfiletypes.config import Options
from pbxfiletypes.errors import E_REPLACE_FAILED, E_WRITE_FAILED, ProjectFileError
from pbxfiletypes.replace import replaced_in_place
from pbxfiletypes.scanner import process_project_file

from samples import leftover_temp_files, read


def test_commit_replaces_content(minimal_project):
    with replaced_in_place(minimal_project) as out:
        out.write("new content\n")
    assert read(minimal_project) == "new content\n"
    assert leftover_temp_files(minimal_project) == []


def test_temp_file_is_a_sibling(minimal_project):
    with replaced_in_place(minimal_project) as out:
        assert len(leftover_temp_files(minimal_project)) == 1
        out.write("x")
    assert leftover_temp_files(minimal_project) == []


def test_body_failure_keeps_original(minimal_project):
    before = read(minimal_project)
    with pytest.raises(RuntimeError):
        with replaced_in_place(minimal_project) as out:
            out.write("partial")
            raise RuntimeError("boom")
    assert read(minimal_project) == before
    assert leftover_temp_files(minimal_project) == []


def test_rename_failure_keeps_original(minimal_project, monkeypatch):
    before = read(minimal_project)

    def failing_replace(src, dst):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(replace.os, "replace", failing_replace)
    with pytest.raises(ProjectFileError) as exc_info:
        process_project_file(minimal_project, Options(fix=True))
    assert exc_info.value.code == E_REPLACE_FAILED
    assert read(minimal_project) == before
    assert leftover_temp_files(minimal_project) == []


def test_temp_creation_failure(minimal_project, monkeypatch):
    def failing_mkstemp(**kwargs):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(replace.tempfile, "mkstemp", failing_mkstemp)
    with pytest.raises(ProjectFileError) as exc_info:
        with replaced_in_place(minimal_project):
            pass
    assert exc_info.value.code == E_WRITE_FAILED
