"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/checksum_service.py
Checksum line formatting and checksum-file lookup for the verify workflow.

Supported line formats (the same ones hash mode prints):
  plain : <hash> <path>
  gnu   : <hash> *<path>   (also the two-space text form <hash>  <path>)
  bsd   : <ALGORITHM>(<path>) = <hash>
A file holding a single bare <hash> line applies to every verified path.
"""
import os
import re
import logging
from dataclasses import dataclass
from typing import List, Optional

from hashfile.core.models import HashAlgorithm, OutputFormat

logger = logging.getLogger(__name__)

_BSD_LINE = re.compile(r"^(?P<label>[A-Za-z0-9_-]+) ?\((?P<path>.*)\) ?= ?(?P<digest>[0-9A-Fa-f]+)$")
_GNU_LINE = re.compile(r"^(?P<digest>[0-9A-Fa-f]+) [ *](?P<path>.+)$")
_PLAIN_LINE = re.compile(r"^(?P<digest>[0-9A-Fa-f]+) (?P<path>.+)$")
_BARE_LINE = re.compile(r"^(?P<digest>[0-9A-Fa-f]+)$")


@dataclass(frozen=True)
class ChecksumEntry:
    """One parsed checksum line. path is None for a bare digest."""
    digest: str
    path: Optional[str] = None
    label: Optional[str] = None


class ChecksumFile:
    """Parsed checksum file with path lookup."""

    def __init__(self, source: str, entries: List[ChecksumEntry]):
        self.source = source
        self.entries = entries

    def lookup(self, target: str) -> Optional[str]:
        """
        Expected digest for target, or None.
        Tries the exact path, then the normalized absolute path, then the basename.
        """
        if len(self.entries) == 1 and self.entries[0].path is None:
            return self.entries[0].digest

        named = [e for e in self.entries if e.path is not None]
        for entry in named:
            if entry.path == target:
                return entry.digest

        target_abs = os.path.normcase(os.path.abspath(target))
        for entry in named:
            if os.path.normcase(os.path.abspath(entry.path)) == target_abs:
                return entry.digest

        target_name = os.path.basename(target)
        for entry in named:
            if os.path.basename(entry.path) == target_name:
                return entry.digest
        return None

    def __len__(self):
        return len(self.entries)


class ChecksumService:
    @staticmethod
    def parse_line(line: str) -> Optional[ChecksumEntry]:
        """
        Parses one checksum line. Blank lines and '#' comments give None.

        Raises:
            ValueError: if the line matches none of the supported formats.
        """
        text = line.rstrip("\r\n")
        if not text.strip() or text.lstrip().startswith("#"):
            return None

        match = _BSD_LINE.match(text)
        if match:
            return ChecksumEntry(
                digest=match.group("digest").lower(),
                path=match.group("path"),
                label=match.group("label").upper()
            )

        for pattern in (_GNU_LINE, _PLAIN_LINE):
            match = pattern.match(text)
            if match:
                return ChecksumEntry(digest=match.group("digest").lower(), path=match.group("path"))

        match = _BARE_LINE.match(text.strip())
        if match:
            return ChecksumEntry(digest=match.group("digest").lower())

        raise ValueError(f"Unrecognized checksum line: {text!r}")

    @classmethod
    def load(cls, path: str) -> ChecksumFile:
        """
        Reads a checksum file. Malformed lines are skipped with a debug record.

        Raises:
            OSError: if the file cannot be read.
        """
        entries = []
        with open(path, "r", encoding="utf-8") as f:
            for lineno, line in enumerate(f, 1):
                try:
                    entry = cls.parse_line(line)
                except ValueError as e:
                    logger.debug(f"{path}:{lineno}: {e}")
                    continue
                if entry is not None:
                    entries.append(entry)
        logger.debug(f"Loaded {len(entries)} checksum entries from {path}")
        return ChecksumFile(path, entries)

    @staticmethod
    def is_checksum_file(verify_arg: str) -> bool:
        """A --verify argument naming an existing file is read as a checksum file."""
        return os.path.isfile(verify_arg)

    @classmethod
    def resolve_expected(cls, verify_arg: str, target: str,
                         checksum_file: Optional[ChecksumFile] = None) -> Optional[str]:
        """
        Expected digest for target: looked up in the checksum file when
        verify_arg names one, otherwise verify_arg itself.
        """
        if checksum_file is None and cls.is_checksum_file(verify_arg):
            checksum_file = cls.load(verify_arg)
        if checksum_file is not None:
            return checksum_file.lookup(target)
        return verify_arg

    @staticmethod
    def format_line(digest: str, path: str, algorithm: HashAlgorithm,
                    output_format: OutputFormat = OutputFormat.PLAIN) -> str:
        """Renders one hash mode output line."""
        if output_format == OutputFormat.BSD:
            return f"{algorithm.label}({path}) = {digest}"
        if output_format == OutputFormat.GNU:
            return f"{digest} *{path}"
        return f"{digest} {path}"
