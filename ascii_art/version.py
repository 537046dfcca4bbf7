#!/usr/bin/env python3
# ascii_art/version.py
"""
Version and build metadata for the ASCII art shell.
"""

__version__ = "1.0.0"
__build__ = "2026-10-17"
__license__ = "MIT"

def version_info() -> str:
    """Return human-readable version string."""
    return f"ASCII Art Shell v{__version__} (build {__build__})"
