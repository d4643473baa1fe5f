"""Data models: Entry, Issue, ScanResult."""

from __future__ import annotations

from dataclasses import dataclass, field

from pbxfiletypes.errors import E_FILE_TYPE_MISMATCH, E_UNKNOWN_FILE_TYPE


@dataclass(frozen=True)
class Entry:
    identifier: str  # 24 uppercase alphanumerics
    name: str
    file_type: str
    path: str  # as written, possibly quoted
    clause_span: tuple[int, int]  # explicitFileType = ...; within the line


@dataclass
class Issue:
    code: str  # E_UNKNOWN_FILE_TYPE | E_FILE_TYPE_MISMATCH
    file_type: str
    path: str
    line_number: int
    fixed_type: str | None = None

    @property
    def fixed(self) -> bool:
        return self.fixed_type is not None


@dataclass
class ScanResult:
    project_path: str
    issues: list[Issue] = field(default_factory=list)

    @property
    def issues_found(self) -> int:
        return len(self.issues)

    @property
    def issues_fixed(self) -> int:
        return sum(1 for issue in self.issues if issue.fixed)

    @property
    def unknown_types(self) -> list[Issue]:
        return [i for i in self.issues if i.code == E_UNKNOWN_FILE_TYPE]

    @property
    def mismatches(self) -> list[Issue]:
        return [i for i in self.issues if i.code == E_FILE_TYPE_MISMATCH]
