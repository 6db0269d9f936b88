"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Implements concurrent duplicate detection by content digest.

Each path is hashed as an independent task on a thread pool. Workers only
return (digest, path) pairs; the calling thread performs every insertion into
the grouping dict, so no lock is needed around the shared mapping.
"""

import os
import logging
from collections import defaultdict
from concurrent.futures import ThreadPoolExecutor
from typing import List, Dict, Tuple, Optional, Iterable

from hashfile.core.interfaces import DuplicateFinder, Hasher
from hashfile.core.hasher import HasherImpl

logger = logging.getLogger(__name__)


def group_by_digest(pairs: Iterable[Tuple[str, str]]) -> Dict[str, List[str]]:
    """
    Groups (digest, path) pairs by digest, keeping only groups with 2+ paths.
    Paths inside a group keep the order in which the pairs arrive.
    """
    groups = defaultdict(list)
    for digest, path in pairs:
        groups[digest].append(path)

    return {digest: paths for digest, paths in groups.items() if len(paths) >= 2}


class DuplicateDetector(DuplicateFinder):
    """
    Finds files with identical content using an injected Hasher.
    Uses a shared ThreadPoolExecutor sized to the CPU count unless told otherwise.
    """

    def __init__(self, hasher: Hasher = None, max_workers: Optional[int] = None):
        self.hasher = hasher or HasherImpl()
        self.max_workers = max_workers or os.cpu_count() or 1

    def find_duplicates(
        self,
        paths: List[str],
        skipped: Optional[List[str]] = None
    ) -> Dict[str, List[str]]:
        """
        Returns digest -> paths for every digest shared by at least two paths.

        Paths that fail to hash are left out of all groups. When `skipped` is
        given, those paths are appended to it in input order.
        """
        paths = [str(p) for p in paths]
        if not paths:
            return {}

        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(paths))) as pool:
            # map() yields in submission order, so merging stays deterministic
            results = list(pool.map(self._hash_one, paths))

        pairs = []
        for path, digest in zip(paths, results):
            if digest is None:
                if skipped is not None:
                    skipped.append(path)
                continue
            pairs.append((digest, path))

        duplicates = group_by_digest(pairs)
        logger.debug(
            f"Hashed {len(pairs)}/{len(paths)} files, "
            f"found {len(duplicates)} duplicate groups"
        )
        return duplicates

    def _hash_one(self, path: str) -> Optional[str]:
        """Worker task: digest of one path, or None if it cannot be read."""
        try:
            return self.hasher.compute_digest(path)
        except OSError as e:
            logger.debug(f"Skipping {path}: {e}")
            return None
