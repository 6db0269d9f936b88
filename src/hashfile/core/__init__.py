"""
Core hashing engine — digest engine, verifier, duplicate detector and path scanner.

This package contains the performance-critical foundation of hashfile:
- HasherImpl: chunked streaming digests (MD5, SHA-1, SHA-256, SHA-512, BLAKE3)
- VerifierImpl: case- and whitespace-insensitive digest comparison
- DuplicateDetector: thread-pool fan-out with single-threaded grouping
- FileScannerImpl: file/directory expansion with optional recursion
- Models: HashAlgorithm, OutputFormat, DuplicateGroup, HashParams, results

No CLI dependencies — suitable for library usage.
"""

from .models import (
    HashAlgorithm, OutputFormat, DuplicateGroup, HashParams, HashResult, VerifyResult)
from .hasher import HasherImpl, ALGORITHM_FACTORIES, DEFAULT_CHUNK_SIZE
from .verifier import VerifierImpl, normalize_digest
from .grouper import DuplicateDetector, group_by_digest
from .scanner import FileScannerImpl, read_path_list, STDIN_PATH

__all__ = [
    "HashAlgorithm",
    "OutputFormat",
    "DuplicateGroup",
    "HashParams",
    "HashResult",
    "VerifyResult",
    "HasherImpl",
    "ALGORITHM_FACTORIES",
    "DEFAULT_CHUNK_SIZE",
    "VerifierImpl",
    "normalize_digest",
    "DuplicateDetector",
    "group_by_digest",
    "FileScannerImpl",
    "read_path_list",
    "STDIN_PATH",
]
