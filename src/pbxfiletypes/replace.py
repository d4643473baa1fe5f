"""In-place replacement of a project file through a sibling temp file."""

from __future__ import annotations

import os
import shutil
import tempfile
from contextlib import contextmanager
from typing import IO, Iterator

from pbxfiletypes.config import FILE_ENCODING
from pbxfiletypes.errors import E_REPLACE_FAILED, E_WRITE_FAILED, ProjectFileError


@contextmanager
def replaced_in_place(path: str) -> Iterator[IO[str]]:
    """Yield a writable temp file that replaces ``path`` on clean exit.

    The temp file lives in the same directory as ``path`` so the final rename
    never crosses filesystems. If the body raises, the temp file is removed
    and ``path`` is left untouched.
    """
    directory = os.path.dirname(os.path.abspath(path))
    try:
        fd, tmp_path = tempfile.mkstemp(
            prefix=f".{os.path.basename(path)}.", suffix=".tmp", dir=directory,
        )
    except OSError as exc:
        raise ProjectFileError(
            E_WRITE_FAILED,
            f"Cannot create temporary file next to {path}: {exc.strerror}",
            {"path": path, "errno": exc.errno},
        ) from exc

    committed = False
    try:
        # newline="" keeps CRLF/LF exactly as the lines were read
        with os.fdopen(fd, "w", encoding=FILE_ENCODING, newline="") as out:
            yield out
        _commit(tmp_path, path)
        committed = True
    except OSError as exc:
        raise ProjectFileError(
            E_WRITE_FAILED,
            f"Cannot write temporary file {tmp_path}: {exc.strerror}",
            {"path": path, "tempPath": tmp_path, "errno": exc.errno},
        ) from exc
    finally:
        if not committed:
            try:
                os.remove(tmp_path)
            except FileNotFoundError:
                pass


def _commit(tmp_path: str, path: str) -> None:
    """Move the temp file over the original in one rename."""
    try:
        shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except OSError as exc:
        raise ProjectFileError(
            E_REPLACE_FAILED,
            f"Cannot replace {path}: {exc.strerror}",
            {"path": path, "tempPath": tmp_path, "errno": exc.errno},
        ) from exc
