"""
Unified command orchestrator for hashing, verification and duplicate detection.
This is the SINGLE source of truth for business logic — the CLI only parses
arguments and prints what these methods return.
"""
import sys
import logging
from typing import List, Optional, Callable, Iterator, TextIO, Tuple

from hashfile.core.models import HashParams, HashResult, VerifyResult, DuplicateGroup
from hashfile.core.hasher import HasherImpl
from hashfile.core.verifier import VerifierImpl
from hashfile.core.grouper import DuplicateDetector
from hashfile.core.scanner import FileScannerImpl, read_path_list, STDIN_PATH
from hashfile.services.checksum_service import ChecksumService

logger = logging.getLogger(__name__)


class HashCommand:
    """
    Orchestrates the three workflows of one run:
    1. Resolve inputs into file paths (arguments, directories, stdin list)
    2. Hash or verify them one at a time, or
    3. Group them by digest concurrently

    Usage:
        params = HashParams(paths=["a.iso"], algorithm=HashAlgorithm.SHA256)
        command = HashCommand(params)
        for result in command.hash_files(command.collect_paths()):
            ...
    """

    def __init__(self, params: HashParams, stdin: Optional[TextIO] = None):
        self.params = params
        self.stdin = stdin if stdin is not None else sys.stdin
        self.hasher = HasherImpl(params.algorithm)
        self.verifier = VerifierImpl(self.hasher)
        self.detector = DuplicateDetector(self.hasher, max_workers=params.workers)

    def collect_paths(self, on_skip: Optional[Callable[[str, str], None]] = None) -> List[str]:
        """File paths to process: the stdin list when requested, else the expanded arguments."""
        if self.params.read_stdin:
            return read_path_list(self.stdin)
        scanner = FileScannerImpl(recursive=self.params.recursive)
        return scanner.collect(self.params.paths, on_skip=on_skip)

    def hash_files(self, paths: List[str]) -> Iterator[HashResult]:
        """Sequentially hashes each path. Read errors are reported per result."""
        for path in paths:
            try:
                digest = self._digest(path)
            except OSError as e:
                logger.debug(f"Failed to hash {path}: {e}")
                yield HashResult(path=path, error=self._describe(e))
                continue
            yield HashResult(path=path, digest=digest)

    def verify_files(self) -> Iterator[VerifyResult]:
        """
        Verifies every path given on the command line against the --verify value.
        Paths are not expanded: directories produce an error result.
        """
        verify_arg = self.params.verify
        checksum_file = None
        if ChecksumService.is_checksum_file(verify_arg):
            checksum_file = ChecksumService.load(verify_arg)

        for path in self.params.paths:
            expected = ChecksumService.resolve_expected(verify_arg, path, checksum_file)
            if expected is None:
                yield VerifyResult(path=path, error=f"no checksum entry in {verify_arg}")
                continue
            try:
                if path == STDIN_PATH:
                    matched = self.verifier.verify(self._stdin_bytes(), expected)
                else:
                    matched = self.verifier.verify(path, expected)
            except OSError as e:
                logger.debug(f"Failed to verify {path}: {e}")
                yield VerifyResult(path=path, error=self._describe(e))
                continue
            yield VerifyResult(path=path, matched=matched)

    def find_duplicates(self, paths: List[str]) -> Tuple[List[DuplicateGroup], List[str]]:
        """
        Returns (groups ordered by digest, paths that could not be hashed).
        The stdin marker is not a file and is reported as skipped.
        """
        skipped = [p for p in paths if p == STDIN_PATH]
        files = [p for p in paths if p != STDIN_PATH]
        mapping = self.detector.find_duplicates(files, skipped=skipped)
        return DuplicateGroup.from_mapping(mapping), skipped

    def _digest(self, path: str) -> str:
        if path == STDIN_PATH:
            return self.hasher.compute_digest(self._stdin_bytes())
        return self.hasher.compute_digest(path)

    def _stdin_bytes(self):
        return getattr(self.stdin, "buffer", self.stdin)

    @staticmethod
    def _describe(error: OSError) -> str:
        """Short message without the errno prefix, e.g. 'No such file or directory'."""
        return error.strerror or str(error)
