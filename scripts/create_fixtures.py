"""Create a sample Xcode project bundle for manual runs.

Usage: python scripts/create_fixtures.py <root_dir>

Creates <root_dir>/Sample.xcodeproj/project.pbxproj with entries that trigger
each kind of issue:
  - Foo.h    declared sourcecode.cpp.h    (E_FILE_TYPE_MISMATCH, fixed to sourcecode.c.h)
  - View.mm  declared sourcecode.c.objc   (E_FILE_TYPE_MISMATCH, fixed to sourcecode.cpp.objcpp)
  - App.swift declared sourcecode.swift   (E_UNKNOWN_FILE_TYPE, never fixed)
  - main.c   declared sourcecode.c.c      (clean)

Then try:
  check-xcode-source-file-types <root_dir>/Sample.xcodeproj
  check-xcode-source-file-types --fix <root_dir>/Sample.xcodeproj
"""

from __future__ import annotations

import os
import sys

ENTRIES = [
    ("0A1B2C3D4E5F60718293A4B5", "Foo.h", "sourcecode.cpp.h"),
    ("1B2C3D4E5F60718293A4B5C6", "View.mm", "sourcecode.c.objc"),
    ("2C3D4E5F60718293A4B5C6D7", "App.swift", "sourcecode.swift"),
    ("3D4E5F60718293A4B5C6D7E8", "main.c", "sourcecode.c.c"),
]


def project_text() -> str:
    refs = "".join(
        f"\t\t{ident} /* {name} */ = {{isa = PBXFileReference; fileEncoding = 4; "
        f"explicitFileType = {file_type}; path = {name}; sourceTree = \"<group>\"; }};\n"
        for ident, name, file_type in ENTRIES
    )
    return (
        "// !$*UTF8*$!\n{\n\tarchiveVersion = 1;\n\tobjectVersion = 46;\n\tobjects = {\n\n"
        "/* Begin PBXFileReference section */\n"
        f"{refs}"
        "/* End PBXFileReference section */\n"
        "\t};\n\trootObject = 4E5F60718293A4B5C6D7E8F9 /* Project object */;\n}\n"
    )


def main() -> None:
    if len(sys.argv) < 2:
        print("Usage: python create_fixtures.py <root_dir>", file=sys.stderr)
        sys.exit(1)

    root = sys.argv[1]
    if not os.path.isdir(root):
        print(f"Root does not exist: {root}", file=sys.stderr)
        sys.exit(1)

    bundle = os.path.join(root, "Sample.xcodeproj")
    os.makedirs(bundle, exist_ok=True)
    path = os.path.join(bundle, "project.pbxproj")
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(project_text())

    print(f"  created: {path}")
    for _, name, file_type in ENTRIES:
        print(f"    {name:<10} {file_type}")


if __name__ == "__main__":
    main()
