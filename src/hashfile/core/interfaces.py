"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the hashing engine.
These protocols enforce structural typing using Python's `typing.Protocol` to ensure
consistency across modules while maintaining flexibility and modularity.

Key Components:
---------------
- DigestAccumulator: Incremental hash object (hashlib and blake3 both satisfy it).
- Hasher: Interface for computing the digest of a byte source.
- Verifier: Interface for comparing a computed digest with an expected value.
- DuplicateFinder: Interface for grouping a batch of paths by content digest.
- FileScanner: Interface for expanding CLI inputs into a flat list of file paths.
"""

import os
from typing import Protocol, List, Dict, Optional, Callable, BinaryIO, Union

ByteSource = Union[str, "os.PathLike[str]", BinaryIO]


# ===== Interfaces =====

class DigestAccumulator(Protocol):
    """Incremental digest state: fed chunk by chunk, then rendered once."""
    def update(self, data: bytes) -> None: ...
    def hexdigest(self) -> str: ...


class Hasher(Protocol):
    """Interface for hashing a whole byte source with one algorithm."""
    def compute_digest(self, source: ByteSource) -> str:
        """
        Stream the source through the configured algorithm.

        Raises:
            OSError: if the source cannot be opened or a read fails.
        """
        ...


class Verifier(Protocol):
    """Interface for checking a byte source against an expected digest."""
    def verify(self, source: ByteSource, expected: str) -> bool: ...


class DuplicateFinder(Protocol):
    """
    Interface for duplicate detection by content digest.

    Unreadable paths never raise; they are left out of every group.
    """
    def find_duplicates(
        self,
        paths: List[str],
        skipped: Optional[List[str]] = None
    ) -> Dict[str, List[str]]:
        """
        Args:
            paths: Flat list of file paths.
            skipped: Optional list that receives every path that failed to hash.

        Returns:
            Mapping digest -> paths, only for digests shared by 2+ paths.
        """
        ...


class FileScanner(Protocol):
    """
    Interface for turning user inputs (files and directories) into file paths.
    """
    def collect(
        self,
        paths: List[str],
        on_skip: Optional[Callable[[str, str], None]] = None
    ) -> List[str]:
        """
        Args:
            paths: Files and directories as given by the user.
            on_skip: Optional callback receiving (path, reason) for ignored inputs.

        Returns:
            Regular file paths in input order.
        """
        ...
