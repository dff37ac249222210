"""
Unit tests for snapshot export.
"""

import os
import stat
import pytest

from goversion.core.exceptions import (
    InsecureArchiveError,
    ReferenceNotFoundError,
    SnapshotError,
)
from goversion.toolchain.snapshot import SnapshotExporter, extract_snapshot
from tests.mocks.git import write_zip


def _mode(path) -> int:
    return stat.S_IMODE(path.stat().st_mode)


class TestExtractSnapshot:
    """Test extract_snapshot function."""

    def test_files_and_directories(self, tmp_path):
        archive = write_zip(
            tmp_path / "a.zip",
            [
                ("src/", None, 0o755),
                ("src/make.bash", b"#!/bin/sh\n", 0o755),
                ("README.md", b"readme\n", 0o644),
            ],
        )
        root = tmp_path / "root"
        root.mkdir()

        count = extract_snapshot(archive, root)

        assert count == 3
        assert (root / "src").is_dir()
        assert (root / "src" / "make.bash").read_bytes() == b"#!/bin/sh\n"
        assert (root / "README.md").read_bytes() == b"readme\n"

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
    def test_modes_preserved(self, tmp_path):
        archive = write_zip(
            tmp_path / "a.zip",
            [("src/make.bash", b"#!/bin/sh\n", 0o755), ("src/doc.txt", b"x", 0o644)],
        )
        root = tmp_path / "root"
        root.mkdir()

        extract_snapshot(archive, root)

        assert _mode(root / "src" / "make.bash") == 0o755
        assert _mode(root / "src" / "doc.txt") == 0o644

    def test_missing_parent_directories_created(self, tmp_path):
        archive = write_zip(tmp_path / "a.zip", [("a/b/c/file.go", b"package c\n", 0o644)])
        root = tmp_path / "root"
        root.mkdir()

        extract_snapshot(archive, root)

        assert (root / "a" / "b" / "c" / "file.go").exists()

    def test_existing_file_truncated(self, tmp_path):
        archive = write_zip(tmp_path / "a.zip", [("file.txt", b"new", 0o644)])
        root = tmp_path / "root"
        root.mkdir()
        (root / "file.txt").write_bytes(b"much older and longer content")

        extract_snapshot(archive, root)

        assert (root / "file.txt").read_bytes() == b"new"

    def test_traversal_rejected(self, tmp_path):
        archive = write_zip(tmp_path / "a.zip", [("../evil.txt", b"x", 0o644)])
        root = tmp_path / "root"
        root.mkdir()

        with pytest.raises(InsecureArchiveError):
            extract_snapshot(archive, root)

        assert not (tmp_path / "evil.txt").exists()

    def test_corrupt_archive(self, tmp_path):
        archive = tmp_path / "bad.zip"
        archive.write_bytes(b"not a zip file")

        with pytest.raises(SnapshotError, match="could not open zip"):
            extract_snapshot(archive, tmp_path)


class TestSnapshotExporter:
    """Test SnapshotExporter.export."""

    def test_export(self, workspace, fake_git):
        exporter = SnapshotExporter(workspace, git=fake_git)

        root = exporter.export("go1.8beta1")

        assert root == workspace.snapshot_dir("go1.8beta1")
        assert (root / "src" / "make.bash").exists()
        assert workspace.version_file("go1.8beta1").read_text() == "go1.8beta1\n"

    def test_resolves_before_archiving(self, workspace, fake_git):
        SnapshotExporter(workspace, git=fake_git).export("go1.8beta1")

        assert [name for name, _ in fake_git.calls] == ["rev_parse", "archive_zip"]

    def test_unknown_ref(self, workspace, fake_git):
        exporter = SnapshotExporter(workspace, git=fake_git)

        with pytest.raises(ReferenceNotFoundError, match="go1.99"):
            exporter.export("go1.99")

        assert ("archive_zip", "go1.99") not in fake_git.calls
        assert not workspace.snapshot_dir("go1.99").exists()

    def test_export_twice_is_idempotent(self, workspace, fake_git):
        exporter = SnapshotExporter(workspace, git=fake_git)

        exporter.export("go1.8beta1")
        exporter.export("go1.8beta1")

        assert workspace.version_file("go1.8beta1").read_bytes() == b"go1.8beta1\n"

    def test_marker_overwrites_previous_content(self, workspace, fake_git):
        root = workspace.snapshot_dir("go1.8beta1")
        root.mkdir()
        workspace.version_file("go1.8beta1").write_text("devel +abcdef something else\n")

        SnapshotExporter(workspace, git=fake_git).export("go1.8beta1")

        assert workspace.version_file("go1.8beta1").read_text() == "go1.8beta1\n"

    def test_temporary_archive_removed(self, workspace, fake_git):
        SnapshotExporter(workspace, git=fake_git).export("go1.8beta1")

        assert not workspace.archive_path("go1.8beta1").exists()

    def test_temporary_archive_removed_on_failure(self, workspace, fake_git):
        fake_git.add_ref("go1.bad", [("../evil.txt", b"x", 0o644)])

        with pytest.raises(InsecureArchiveError):
            SnapshotExporter(workspace, git=fake_git).export("go1.bad")

        assert not workspace.archive_path("go1.bad").exists()
        # No marker for an incomplete extraction
        assert not workspace.version_file("go1.bad").exists()
