"""Directory listing primitive for approved files.

Uses glob with recursive=True: ** matches any number of directories,
including none.
"""

from __future__ import annotations

import glob
import os
import posixpath


def approved_file_glob(directory: str, pattern: str) -> str:
    """Build recursive glob rooted at directory.

    Empty directory (file at current working directory) gives a relative
    pattern, so matches come back without a "./" prefix.
    Glob metacharacters in directory (e.g. "test_render[dark]") match literally.
    """
    return posixpath.join(glob.escape(directory), "**", pattern)


def glob_approved_files(directory: str, pattern: str) -> list[str]:
    """List files matching pattern anywhere beneath directory."""
    matches = glob.glob(approved_file_glob(directory, pattern), recursive=True)
    return sorted(path for path in matches if os.path.isfile(path))
