"""
hashfile — fast file hashing, verification and duplicate detection.

Core features:
- Five algorithms: MD5, SHA-1, SHA-256, SHA-512, BLAKE3 (streamed in 8 KiB chunks)
- Verification against a literal hash or a checksum file (plain, BSD or GNU lines)
- Concurrent duplicate detection by content hash
- CLI interface: `hashfile --help`
"""
from importlib.metadata import version as _version, PackageNotFoundError

try:
    __version__ = _version("hashfile")
except PackageNotFoundError:
    __version__ = "0.0.0"

from typing import Dict, List

# Public API — only what users should import directly
from hashfile.commands import HashCommand
from hashfile.core import (
    HashAlgorithm, OutputFormat, DuplicateGroup, HashParams, HashResult, VerifyResult,
    HasherImpl, VerifierImpl, DuplicateDetector, FileScannerImpl)
from hashfile.core.interfaces import ByteSource
from hashfile.services import ChecksumService


def compute_digest(source: ByteSource, algorithm: HashAlgorithm = HashAlgorithm.SHA256) -> str:
    """Digest of a path or binary stream. Raises OSError if it cannot be read."""
    return HasherImpl(algorithm).compute_digest(source)


def verify(source: ByteSource, algorithm: HashAlgorithm, expected: str) -> bool:
    """True if the source hashes to expected (case and surrounding whitespace ignored)."""
    return VerifierImpl(HasherImpl(algorithm)).verify(source, expected)


def find_duplicates(paths: List[str], algorithm: HashAlgorithm = HashAlgorithm.SHA256) -> Dict[str, List[str]]:
    """digest -> paths for content shared by 2+ paths. Unreadable paths are left out."""
    return DuplicateDetector(HasherImpl(algorithm)).find_duplicates(paths)


__all__ = [
    "HashCommand",
    "HashAlgorithm",
    "OutputFormat",
    "DuplicateGroup",
    "HashParams",
    "HashResult",
    "VerifyResult",
    "HasherImpl",
    "VerifierImpl",
    "DuplicateDetector",
    "FileScannerImpl",
    "ChecksumService",
    "compute_digest",
    "verify",
    "find_duplicates",
    "__version__",
]
