"""Check and fix source file types declared in Xcode project files."""

__version__ = "0.1.0"
