"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements streaming file hashing with pluggable digest algorithms.

The HasherImpl class resolves its algorithm once at construction and then
streams every byte source through a fresh accumulator in fixed-size chunks,
so arbitrarily large files never have to fit in memory.
"""

import errno
import hashlib
import logging
from typing import Callable, Dict

import blake3

from hashfile.core.interfaces import ByteSource, DigestAccumulator, Hasher
from hashfile.core.models import HashAlgorithm

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 8 * 1024  # 8 KiB


# Use the same way to register any other algorithm
ALGORITHM_FACTORIES: Dict[HashAlgorithm, Callable[[], DigestAccumulator]] = {
    HashAlgorithm.MD5: hashlib.md5,
    HashAlgorithm.SHA1: hashlib.sha1,
    HashAlgorithm.SHA256: hashlib.sha256,
    HashAlgorithm.SHA512: hashlib.sha512,
    HashAlgorithm.BLAKE3: blake3.blake3,
}


class HasherImpl(Hasher):
    """
    Computes the digest of a file or binary stream with one fixed algorithm.
    Holds no per-call state, so a single instance can be shared across threads.
    """

    def __init__(self, algorithm: HashAlgorithm = HashAlgorithm.SHA256,
                 chunk_size: int = DEFAULT_CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        try:
            self._factory = ALGORITHM_FACTORIES[algorithm]
        except KeyError:
            raise ValueError(f"Unsupported hash algorithm: {algorithm!r}") from None
        self.algorithm = algorithm
        self.chunk_size = chunk_size

    def compute_digest(self, source: ByteSource) -> str:
        """
        Returns the lowercase hex digest of the source.

        A path is opened and closed here. An open stream is read to EOF from its
        current position and left open for the caller.

        Raises:
            OSError: if the source cannot be opened or a read fails mid-stream.
                A non-blocking stream with no data pending raises BlockingIOError.
        """
        if hasattr(source, "read"):
            return self._digest_stream(source)

        try:
            f = open(source, "rb")
        except ValueError as e:
            # open() rejects names it cannot pass to the OS, e.g. an embedded NUL
            raise OSError(errno.EINVAL, str(e), str(source)) from e
        with f:
            digest = self._digest_stream(f)
        logger.debug(f"{self.algorithm.value} {digest} {source}")
        return digest

    def _digest_stream(self, stream) -> str:
        accumulator = self._factory()
        while True:
            chunk = stream.read(self.chunk_size)
            if chunk is None:
                raise BlockingIOError(errno.EAGAIN, "Stream has no data available without blocking")
            if not chunk:
                break
            accumulator.update(chunk)
        return accumulator.hexdigest()

    def __repr__(self):
        return f"<HasherImpl algorithm={self.algorithm.value}, chunk_size={self.chunk_size}>"
