"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for digest computation, verification and duplicate detection.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional
from enum import Enum


# =============================
# Enums
# =============================

class HashAlgorithm(Enum):
    """
    Digest algorithm selector. The set is closed: every member has a dispatch
    entry in core/hasher.py.
    """
    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"
    BLAKE3 = "blake3"

    @property
    def hex_length(self) -> int:
        """Number of hex characters in a digest produced by this algorithm."""
        mapping = {
            HashAlgorithm.MD5: 32,
            HashAlgorithm.SHA1: 40,
            HashAlgorithm.SHA256: 64,
            HashAlgorithm.SHA512: 128,
            HashAlgorithm.BLAKE3: 64,
        }
        return mapping[self]

    @property
    def label(self) -> str:
        """Upper-case tag used by the BSD output format, e.g. SHA256(file) = ..."""
        return self.value.upper()

    @property
    def display_name(self) -> str:
        """Human-readable name for help text."""
        mapping = {
            HashAlgorithm.MD5: "MD5",
            HashAlgorithm.SHA1: "SHA-1",
            HashAlgorithm.SHA256: "SHA-256",
            HashAlgorithm.SHA512: "SHA-512",
            HashAlgorithm.BLAKE3: "BLAKE3",
        }
        return mapping.get(self, self.value)

    @classmethod
    def from_name(cls, name: str) -> "HashAlgorithm":
        """Resolve 'sha256', 'SHA-256' or 'sha_256' to a member."""
        key = name.strip().lower().replace("-", "").replace("_", "")
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(f"Unsupported hash algorithm: {name!r}")

    def __repr__(self) -> str:
        return self.value


class OutputFormat(Enum):
    """Line format for hash mode output."""
    PLAIN = "plain"
    BSD = "bsd"
    GNU = "gnu"

    @property
    def description(self) -> str:
        mapping = {
            OutputFormat.PLAIN: "<hash> <path>",
            OutputFormat.BSD: "<ALGORITHM>(<path>) = <hash>",
            OutputFormat.GNU: "<hash> *<path>",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class DuplicateGroup:
    """
    Paths whose content produced the same digest under one algorithm.
    """
    digest: str
    paths: List[str]

    @property
    def duplicate_count(self) -> int:
        """How many files are in this group."""
        return len(self.paths)

    def is_duplicate(self) -> bool:
        """True if this group contains at least two files."""
        return self.duplicate_count >= 2

    @staticmethod
    def from_mapping(mapping: Dict[str, List[str]]) -> List["DuplicateGroup"]:
        """
        Converts a digest -> paths mapping into groups ordered by digest.
        Concurrent detection gives no ordering guarantee, so presentation sorts here.
        """
        return [
            DuplicateGroup(digest=digest, paths=list(paths))
            for digest, paths in sorted(mapping.items())
            if len(paths) >= 2
        ]

    def __repr__(self):
        return f"<DuplicateGroup digest={self.digest[:12]}, count={len(self.paths)}>"


@dataclass
class HashResult:
    """Outcome of hashing one input. Exactly one of digest/error is set."""
    path: str
    digest: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class VerifyResult:
    """Outcome of verifying one input against its expected digest."""
    path: str
    matched: bool = False
    error: Optional[str] = None

    @property
    def status(self) -> str:
        if self.error is not None:
            return "ERROR"
        return "OK" if self.matched else "FAILED"


"""
DTO for hashing parameters with built-in validation.
Interface-agnostic — the CLI builds it from argparse arguments.
"""

@dataclass
class HashParams:
    """Parameters for a hash/verify/duplicates run with validation."""
    paths: List[str] = field(default_factory=list)
    algorithm: HashAlgorithm = HashAlgorithm.SHA256
    recursive: bool = False
    read_stdin: bool = False
    output_format: OutputFormat = OutputFormat.PLAIN
    quiet: bool = False
    verify: Optional[str] = None
    duplicates: bool = False
    workers: Optional[int] = None

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if isinstance(self.algorithm, str):
            self.algorithm = HashAlgorithm.from_name(self.algorithm)

        if isinstance(self.output_format, str):
            self.output_format = OutputFormat(self.output_format.lower())

        self.paths = [str(p) for p in self.paths]

        if self.verify is not None:
            if not self.verify.strip():
                raise ValueError("Expected checksum cannot be empty")
            if self.duplicates:
                raise ValueError("--verify cannot be combined with --duplicates")
            if not self.paths:
                raise ValueError("No files specified for verification")

        if self.workers is not None and self.workers < 1:
            raise ValueError("Worker count must be at least 1")

    @property
    def mode(self) -> str:
        if self.verify is not None:
            return "verify"
        if self.duplicates:
            return "duplicates"
        return "hash"
