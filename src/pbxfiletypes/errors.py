"""Error taxonomy: issue codes and the fatal project file error."""

from __future__ import annotations

from typing import Any

# Content issues (counted, never fatal)
E_UNKNOWN_FILE_TYPE = "E_UNKNOWN_FILE_TYPE"
E_FILE_TYPE_MISMATCH = "E_FILE_TYPE_MISMATCH"

# Fatal I/O failures
E_OPEN_FAILED = "E_OPEN_FAILED"
E_WRITE_FAILED = "E_WRITE_FAILED"
E_REPLACE_FAILED = "E_REPLACE_FAILED"


class ProjectFileError(Exception):
    """Fatal failure reading or replacing a project file. Aborts the run."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
