"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Expands user inputs into the flat list of file paths consumed by the hashing core.
Features:
- Uses pathlib.Path for cross-platform path checks
- Recursively walks directories when asked to
- Reads newline-separated path lists from a text stream (stdin)
"""

import os
import logging
from pathlib import Path
from typing import List, Optional, Callable, TextIO

from hashfile.core.interfaces import FileScanner

logger = logging.getLogger(__name__)

STDIN_PATH = "-"


def read_path_list(stream: TextIO) -> List[str]:
    """
    Reads one path per line. Trailing newlines are stripped, blank lines ignored.
    Leading and trailing spaces are kept because they are valid in file names.
    """
    paths = []
    for line in stream:
        path = line.rstrip("\r\n")
        if path.strip():
            paths.append(path)
    logger.debug(f"Read {len(paths)} paths from stream")
    return paths


class FileScannerImpl(FileScanner):
    """
    Turns files and directories into file paths.

    Attributes:
        recursive: Walk into directories instead of skipping them
    """

    def __init__(self, recursive: bool = False):
        self.recursive = recursive

    def collect(
        self,
        paths: List[str],
        on_skip: Optional[Callable[[str, str], None]] = None
    ) -> List[str]:
        """
        Returns regular files in input order; directory contents are sorted.
        The stdin marker "-" is passed through untouched.
        """
        found_files = []
        for raw in paths:
            raw = str(raw)
            if raw == STDIN_PATH:
                found_files.append(raw)
                continue

            path = Path(raw)
            if path.is_file():
                found_files.append(raw)
            elif path.is_dir():
                if self.recursive:
                    found_files.extend(self._walk(path))
                else:
                    self._skip(raw, "is a directory (use --recursive)", on_skip)
            elif path.exists():
                self._skip(raw, "not a regular file", on_skip)
            else:
                self._skip(raw, "no such file or directory", on_skip)

        logger.debug(f"Collected {len(found_files)} files from {len(paths)} inputs")
        return found_files

    @staticmethod
    def _walk(root: Path) -> List[str]:
        """All regular files below root. Symbolic links are not followed."""
        found = []

        def _on_error(error: OSError):
            logger.debug(f"Cannot read directory {error.filename}: {error}")

        for dirpath, dirs, files in os.walk(str(root), onerror=_on_error):
            dirs.sort()
            for filename in sorted(files):
                path = Path(dirpath) / filename
                try:
                    if path.is_symlink():
                        logger.debug(f"Skipping symbolic link: {path}")
                        continue
                    if not path.is_file():
                        continue
                except OSError as e:
                    logger.debug(f"Could not stat {path}: {e}")
                    continue
                found.append(str(path))
        return found

    @staticmethod
    def _skip(path: str, reason: str, on_skip: Optional[Callable[[str, str], None]]):
        logger.debug(f"Skipping {path}: {reason}")
        if on_skip:
            on_skip(path, reason)
