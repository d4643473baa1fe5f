"""Configuration: project file names, section markers, run options."""

from __future__ import annotations

from dataclasses import dataclass


PROJECT_FILE_NAME = "project.pbxproj"
BUNDLE_SUFFIX = ".xcodeproj"  # e.g. WebCore.xcodeproj/project.pbxproj
FILE_ENCODING = "utf-8"

SECTION_NAME = "PBXFileReference"
BEGIN_SECTION = f"/* Begin {SECTION_NAME} section */"
END_SECTION = f"/* End {SECTION_NAME} section */"

SOURCE_TYPE_PREFIX = "sourcecode."


@dataclass(frozen=True)
class Options:
    fix: bool = False
    warnings: bool = True
