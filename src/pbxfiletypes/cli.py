"""Command line entry point: check-xcode-source-file-types."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from pbxfiletypes.config import Options
from pbxfiletypes.errors import ProjectFileError
from pbxfiletypes.models import ScanResult
from pbxfiletypes.scanner import Warn, process_project_file, resolve_project_path

DESCRIPTION = (
    "Check the explicit source file types in Xcode project files against "
    "file extensions, and optionally fix them in place."
)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_FATAL = 2


class _Parser(argparse.ArgumentParser):
    """ArgumentParser whose parse errors exit 1 instead of 2."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="check-xcode-source-file-types",
        description=DESCRIPTION,
        add_help=False,
    )
    parser.add_argument(
        "paths", nargs="*", metavar="PATH",
        help="project.pbxproj file or .xcodeproj bundle",
    )
    parser.add_argument(
        "-f", "--fix", action="store_true",
        help="rewrite incorrect file types in place (default: report only)",
    )
    parser.add_argument(
        "-w", "--warnings", action=argparse.BooleanOptionalAction, default=True,
        help="print warnings and per-file summaries",
    )
    parser.add_argument("-h", "--help", action="store_true", help="show this help and exit")
    return parser


def _stderr(message: str) -> None:
    print(message, file=sys.stderr)


def _quiet(_message: str) -> None:
    pass


def report(result: ScanResult, options: Options, warn: Warn) -> None:
    """Print the per-file summary."""
    path = result.project_path
    found = result.issues_found
    fixed = result.issues_fixed

    if found:
        warn(f"{path}: {found} issue{'s' if found != 1 else ''} found.")
    else:
        warn(f"{path}: No issues found.")

    if options.fix and fixed:
        warn(f"{path}: {fixed} issue{'s' if fixed != 1 else ''} fixed.")
        warn(f"NOTE: Open and close {path} in Xcode to normalize any remaining formatting.")


def run(paths: Sequence[str], options: Options) -> list[ScanResult]:
    """Process each path in order. ProjectFileError aborts the whole run."""
    warn: Warn = _stderr if options.warnings else _quiet
    results: list[ScanResult] = []

    for path in paths:
        project_path = resolve_project_path(path)
        if project_path is None:
            warn(f"WARNING: Not an Xcode project file: {path}")
            continue
        result = process_project_file(project_path, options, warn)
        report(result, options, warn)
        results.append(result)

    return results


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.help or not args.paths:
        if args.help:
            parser.print_help(sys.stderr)
        else:
            parser.print_usage(sys.stderr)
        return EXIT_USAGE

    options = Options(fix=args.fix, warnings=args.warnings)
    try:
        run(args.paths, options)
    except ProjectFileError as e:
        print(f"ERROR: {e.message}", file=sys.stderr)
        return EXIT_FATAL

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
