"""
Unit tests for DuplicateDetector and the group_by_digest merge step.
Verifies grouping, singleton filtering, silent per-path failures and
that concurrent hashing produces the same groups as a sequential pass.
"""
import os
from unittest import mock
import pytest
from hashfile.core import DuplicateDetector, HasherImpl, HashAlgorithm, group_by_digest


def _as_sets(mapping):
    """Order-insensitive view of a digest -> paths mapping."""
    return {digest: frozenset(paths) for digest, paths in mapping.items()}


class TestGroupByDigest:
    """The merge step, tested in isolation from any I/O."""

    def test_filters_single_paths(self):
        pairs = [("h1", "/a"), ("h1", "/b"), ("h2", "/c")]
        assert group_by_digest(pairs) == {"h1": ["/a", "/b"]}

    def test_keeps_arrival_order_inside_group(self):
        pairs = [("h1", "/z"), ("h2", "/x"), ("h1", "/a"), ("h2", "/y"), ("h1", "/m")]
        assert group_by_digest(pairs) == {"h1": ["/z", "/a", "/m"], "h2": ["/x", "/y"]}

    def test_empty_input(self):
        assert group_by_digest([]) == {}

    def test_all_unique(self):
        assert group_by_digest([("h1", "/a"), ("h2", "/b"), ("h3", "/c")]) == {}


class TestDuplicateDetector:
    """Duplicate detection over real files."""

    def test_two_identical_one_different(self, test_files):
        """A and B share content, C differs: exactly one group {A, B}."""
        detector = DuplicateDetector(HasherImpl(HashAlgorithm.SHA256))
        a, b, c = (str(test_files[k]) for k in ("dup2_a", "dup2_b", "unique1"))

        result = detector.find_duplicates([a, b, c])

        assert len(result) == 1
        (digest, paths), = result.items()
        assert sorted(paths) == sorted([a, b])
        assert digest == HasherImpl(HashAlgorithm.SHA256).compute_digest(a)
        assert all(c not in group for group in result.values())

    def test_no_duplicates_gives_empty_mapping(self, test_files):
        paths = [str(test_files[k]) for k in ("dup1_a", "dup2_a", "unique1", "unique2")]
        assert DuplicateDetector().find_duplicates(paths) == {}

    def test_groups_of_three(self, test_files):
        paths = [str(test_files[k]) for k in ("dup1_a", "unique1", "dup1_b", "sub_dup")]
        result = DuplicateDetector().find_duplicates(paths)

        assert list(result.values()) == [[paths[0], paths[2], paths[3]]]

    def test_empty_input(self):
        assert DuplicateDetector().find_duplicates([]) == {}

    def test_nonexistent_path_is_silently_dropped(self, test_files, tmp_path):
        missing = str(tmp_path / "missing.txt")
        paths = [str(test_files["dup1_a"]), missing, str(test_files["dup1_b"]), str(test_files["unique1"])]

        result = DuplicateDetector().find_duplicates(paths)

        assert len(result) == 1
        assert list(result.values())[0] == [str(test_files["dup1_a"]), str(test_files["dup1_b"])]
        assert all(missing not in group for group in result.values())

    def test_path_the_os_cannot_open_is_dropped(self, test_files):
        """A malformed name (embedded NUL, e.g. from a --stdin list) must not abort the pass."""
        a, b = str(test_files["dup1_a"]), str(test_files["dup1_b"])
        skipped = []

        result = DuplicateDetector().find_duplicates([a, "bad\x00path", b], skipped=skipped)

        assert list(result.values()) == [[a, b]]
        assert skipped == ["bad\x00path"]

    def test_skipped_paths_are_reported_when_requested(self, test_files, tmp_path):
        missing = str(tmp_path / "missing.txt")
        directory = str(tmp_path)
        skipped = []

        result = DuplicateDetector().find_duplicates(
            [missing, str(test_files["dup1_a"]), directory, str(test_files["dup1_b"])],
            skipped=skipped
        )

        assert skipped == [missing, directory]
        assert len(result) == 1

    def test_only_unreadable_paths(self, tmp_path):
        skipped = []
        paths = [str(tmp_path / "a"), str(tmp_path / "b")]
        assert DuplicateDetector().find_duplicates(paths, skipped=skipped) == {}
        assert skipped == paths

    def test_worker_error_other_than_oserror_propagates(self, test_files):
        """Only read failures are swallowed; programming errors still surface."""
        hasher = mock.Mock()
        hasher.compute_digest.side_effect = TypeError("boom")
        detector = DuplicateDetector(hasher)

        with pytest.raises(TypeError):
            detector.find_duplicates([str(test_files["dup1_a"])])

    def test_defaults_to_cpu_count_workers(self):
        with mock.patch.object(os, "cpu_count", return_value=6):
            assert DuplicateDetector().max_workers == 6

    def test_explicit_worker_count(self):
        assert DuplicateDetector(max_workers=3).max_workers == 3

    def test_concurrent_result_matches_sequential_reference(self, tmp_path):
        """
        10,000 files with 97 distinct contents: the concurrent pass must give the
        same group membership as a plain sequential loop.
        """
        paths = []
        for i in range(10_000):
            path = tmp_path / f"f{i:05d}.bin"
            # Every 10th file is unique so singletons are mixed in
            content = f"unique-{i}" if i % 10 == 0 else f"shared-{i % 97}"
            path.write_bytes(content.encode())
            paths.append(str(path))

        hasher = HasherImpl(HashAlgorithm.BLAKE3)

        reference = {}
        for path in paths:
            reference.setdefault(hasher.compute_digest(path), []).append(path)
        reference = {d: p for d, p in reference.items() if len(p) >= 2}

        result = DuplicateDetector(hasher, max_workers=8).find_duplicates(paths)

        assert _as_sets(result) == _as_sets(reference)
        assert sum(len(p) for p in result.values()) == 9_000
        # merged in input order
        assert result == reference
