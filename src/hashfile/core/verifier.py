"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/verifier.py
Checks a byte source against an expected digest.
"""

from hashfile.core.interfaces import ByteSource, Hasher, Verifier


def normalize_digest(text: str) -> str:
    """Trim surrounding whitespace and case-fold a digest string."""
    return text.strip().lower()


class VerifierImpl(Verifier):
    """
    Compares a freshly computed digest with an expected value.
    Whether the expected value came from the command line or a checksum file
    is decided by the caller.
    """

    def __init__(self, hasher: Hasher):
        self.hasher = hasher

    def verify(self, source: ByteSource, expected: str) -> bool:
        """
        True iff the digest of source equals expected after trimming and case-folding.

        Raises:
            OSError: if the source cannot be read.
        """
        actual = self.hasher.compute_digest(source)
        return normalize_digest(actual) == normalize_digest(expected)
