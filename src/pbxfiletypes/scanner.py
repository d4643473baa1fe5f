"""Project file scanner: find typed source entries and check them."""

from __future__ import annotations

import os
from typing import Callable, Iterable, Iterator

from pbxfiletypes.config import (
    BEGIN_SECTION,
    BUNDLE_SUFFIX,
    END_SECTION,
    FILE_ENCODING,
    PROJECT_FILE_NAME,
    Options,
)
from pbxfiletypes.entries import parse_entry, rewrite_clause
from pbxfiletypes.errors import (
    E_FILE_TYPE_MISMATCH,
    E_OPEN_FAILED,
    E_UNKNOWN_FILE_TYPE,
    ProjectFileError,
)
from pbxfiletypes.filetypes import expected_extension, extension_of, file_type_for
from pbxfiletypes.models import Issue, ScanResult
from pbxfiletypes.replace import replaced_in_place

Warn = Callable[[str], None]


def _ignore(_message: str) -> None:
    pass


def resolve_project_path(path: str) -> str | None:
    """Map a command line argument to a project file path.

    "Foo.xcodeproj"                 -> "Foo.xcodeproj/project.pbxproj"
    "Foo.xcodeproj/project.pbxproj" -> unchanged
    anything else                   -> None
    """
    stripped = path.rstrip("/" + os.sep) or path
    if stripped.endswith(BUNDLE_SUFFIX):
        stripped = os.path.join(stripped, PROJECT_FILE_NAME)
    if os.path.basename(stripped) != PROJECT_FILE_NAME:
        return None
    return stripped


def _is_marker(line: str, marker: str) -> bool:
    return line.rstrip("\r\n") == marker


def scan_lines(
    lines: Iterable[str],
    result: ScanResult,
    fix: bool = False,
    warn: Warn = _ignore,
) -> Iterator[str]:
    """Yield the output lines for one project file, recording issues in result.

    Lines before the begin marker and after the end marker are passed
    through without being looked at.
    """
    it = iter(lines)
    line_number = 0

    for line in it:
        line_number += 1
        yield line
        if _is_marker(line, BEGIN_SECTION):
            break

    for line in it:
        line_number += 1
        if _is_marker(line, END_SECTION):
            yield line
            break
        yield _check_line(line, line_number, result, fix, warn)

    yield from it


def _check_line(
    line: str,
    line_number: int,
    result: ScanResult,
    fix: bool,
    warn: Warn,
) -> str:
    entry = parse_entry(line)
    if entry is None:
        return line

    extension = extension_of(entry.path)
    expected = expected_extension(entry.file_type)

    if expected is None:
        result.issues.append(Issue(E_UNKNOWN_FILE_TYPE, entry.file_type, entry.path, line_number))
        warn(f"WARNING: Unknown file type '{entry.file_type}' for file '{entry.path}'.")
        return line

    if expected == extension:
        return line

    issue = Issue(E_FILE_TYPE_MISMATCH, entry.file_type, entry.path, line_number)
    result.issues.append(issue)
    warn(f"WARNING: Incorrect file type '{entry.file_type}' for file '{entry.path}'.")

    if fix:
        new_type = file_type_for(extension)
        if new_type is not None:
            issue.fixed_type = new_type
            return rewrite_clause(line, entry, new_type)
    return line


def process_project_file(
    project_path: str,
    options: Options = Options(),
    warn: Warn = _ignore,
) -> ScanResult:
    """Check one project file; with options.fix, rewrite it in place.

    Raises ProjectFileError when the file cannot be read or replaced.
    """
    result = ScanResult(project_path=project_path)
    lines = _read_lines(project_path)

    if options.fix:
        with replaced_in_place(project_path) as out:
            out.writelines(scan_lines(lines, result, fix=True, warn=warn))
    else:
        for _ in scan_lines(lines, result, fix=False, warn=warn):
            pass

    return result


def _read_lines(project_path: str) -> list[str]:
    """Read the whole file, keeping line terminators as they are on disk."""
    try:
        with open(project_path, encoding=FILE_ENCODING, newline="") as f:
            return f.readlines()
    except OSError as exc:
        raise ProjectFileError(
            E_OPEN_FAILED,
            f"Cannot open {project_path}: {exc.strerror}",
            {"path": project_path, "errno": exc.errno},
        ) from exc
    except UnicodeDecodeError as exc:
        raise ProjectFileError(
            E_OPEN_FAILED,
            f"Cannot decode {project_path} as {FILE_ENCODING}",
            {"path": project_path, "position": exc.start},
        ) from exc
