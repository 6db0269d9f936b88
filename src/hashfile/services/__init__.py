"""Checksum formatting and checksum-file lookup services."""

from .checksum_service import ChecksumService, ChecksumFile, ChecksumEntry

__all__ = ["ChecksumService", "ChecksumFile", "ChecksumEntry"]
