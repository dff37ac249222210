"""
Unit tests for install orchestration.
"""

import pytest
from unittest.mock import MagicMock

from goversion.core.config import Config
from goversion.core.exceptions import BuildError, LockTimeoutError, MirrorError
from goversion.core.locking import LockManager
from goversion.toolchain.installer import BOOTSTRAP_ENV, InstallOrchestrator
from goversion.toolchain.snapshot import SnapshotExporter

BOOTSTRAP = "release-branch.go1.4"


class RecordingBuilder:
    """Builder stand-in that records builds and leaves a go binary behind."""

    def __init__(self, workspace, make_tool_binary, events):
        self.workspace = workspace
        self.make_tool_binary = make_tool_binary
        self.events = events

    def build(self, ref, env=None):
        self.events.append(("build", ref, dict(env or {})))
        return self.make_tool_binary(ref)


@pytest.fixture
def events():
    return []


@pytest.fixture
def orchestrator(workspace, config, fake_git, make_tool_binary, events):
    exporter = SnapshotExporter(workspace, git=fake_git)
    original_export = exporter.export

    def export(ref):
        events.append(("export", ref))
        return original_export(ref)

    exporter.export = export
    return InstallOrchestrator(
        workspace,
        config,
        git=fake_git,
        exporter=exporter,
        builder=RecordingBuilder(workspace, make_tool_binary, events),
    )


class TestInstall:
    """Test InstallOrchestrator.install."""

    def test_bootstrap_built_first_when_absent(self, orchestrator, events, workspace):
        orchestrator.install("go1.8beta1")

        assert [e[:2] for e in events] == [
            ("export", BOOTSTRAP),
            ("build", BOOTSTRAP),
            ("export", "go1.8beta1"),
            ("build", "go1.8beta1"),
        ]

    def test_bootstrap_skipped_when_present(
        self, orchestrator, events, workspace, make_tool_binary
    ):
        make_tool_binary(BOOTSTRAP)

        orchestrator.install("go1.8beta1")

        assert [e[:2] for e in events] == [
            ("export", "go1.8beta1"),
            ("build", "go1.8beta1"),
        ]

    def test_build_points_at_bootstrap(self, orchestrator, events, workspace):
        orchestrator.install("go1.8beta1")

        bootstrap_build = events[1]
        target_build = events[3]
        assert BOOTSTRAP_ENV not in bootstrap_build[2]
        assert target_build[2][BOOTSTRAP_ENV] == str(workspace.snapshot_dir(BOOTSTRAP))

    def test_mirror_updated_before_export(self, orchestrator, fake_git):
        orchestrator.install("go1.8beta1")

        assert fake_git.calls[0][0] == "clone_bare"

    def test_end_to_end_leaves_binary(self, orchestrator, workspace):
        binary = orchestrator.install("go1.8beta1")

        assert binary == workspace.parent / "go1.8beta1" / "bin" / "go"
        assert binary.exists()
        assert workspace.version_file("go1.8beta1").read_text() == "go1.8beta1\n"

    def test_bootstrap_failure_stops_install(self, workspace, config, fake_git, events):
        builder = MagicMock()
        builder.build.side_effect = BuildError("could not build release-branch.go1.4")
        orchestrator = InstallOrchestrator(
            workspace, config, git=fake_git, builder=builder
        )

        with pytest.raises(BuildError):
            orchestrator.install("go1.8beta1")

        builder.build.assert_called_once_with(BOOTSTRAP)
        assert not workspace.snapshot_dir("go1.8beta1").exists()

    def test_mirror_failure_stops_install(self, workspace, config, fake_git):
        fake_git.fail_clone = True
        exporter = MagicMock()
        orchestrator = InstallOrchestrator(
            workspace, config, git=fake_git, exporter=exporter
        )

        with pytest.raises(MirrorError):
            orchestrator.install("go1.8beta1")

        exporter.export.assert_not_called()

    def test_lock_held_elsewhere(self, orchestrator, workspace):
        other = LockManager(workspace.lock_path)
        orchestrator.config = Config(parent_dir=workspace.parent, lock_timeout=0.1)

        with other.workspace_lock(timeout=1):
            with pytest.raises(LockTimeoutError):
                orchestrator.install("go1.8beta1")


class TestUpdateAndExport:
    """Test the mirror-only and export-only entry points."""

    def test_update(self, orchestrator, fake_git, events):
        orchestrator.update()

        assert [c[0] for c in fake_git.calls] == ["clone_bare"]
        assert events == []

    def test_export_without_build(self, orchestrator, events, workspace):
        root = orchestrator.export("go1.8beta1")

        assert root == workspace.snapshot_dir("go1.8beta1")
        assert events == [("export", "go1.8beta1")]
