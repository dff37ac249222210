"""
Pytest configuration and shared fixtures for goversion tests.
"""

import pytest
from pathlib import Path

from goversion.core.config import Config
from goversion.core.directory import Workspace
from goversion.core.platform import PlatformInfo, clear_platform_cache
from tests.mocks.git import FakeGitClient


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path_factory, monkeypatch):
    """Keep user configuration and host settings out of every test."""
    # Outside tmp_path so tests may assert on its exact contents
    fake_home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(fake_home))
    monkeypatch.setenv("USERPROFILE", str(fake_home))
    monkeypatch.delenv("GOVERSION_CONFIG", raising=False)
    monkeypatch.delenv("GOVERSION_PARENT", raising=False)
    monkeypatch.delenv("GOROOT_BOOTSTRAP", raising=False)
    yield fake_home
    clear_platform_cache()


@pytest.fixture
def linux_amd64() -> PlatformInfo:
    return PlatformInfo("linux", "amd64")


@pytest.fixture
def parent_dir(tmp_path) -> Path:
    """Toolchain parent directory, as <GOPATH>/src/golang.org/x would be."""
    parent = tmp_path / "gopath" / "src" / "golang.org" / "x"
    parent.mkdir(parents=True)
    return parent


@pytest.fixture
def workspace(parent_dir, linux_amd64) -> Workspace:
    return Workspace(parent_dir, platform=linux_amd64)


@pytest.fixture
def config(parent_dir) -> Config:
    return Config(parent_dir=parent_dir, lock_timeout=5)


@pytest.fixture
def fake_git() -> FakeGitClient:
    git = FakeGitClient()
    git.add_ref("release-branch.go1.4")
    git.add_ref("go1.8beta1")
    return git


@pytest.fixture
def make_tool_binary(workspace):
    """Return a function creating the go binary a successful build leaves behind."""

    def _make(ref: str, ws: Workspace = workspace) -> Path:
        binary = ws.tool_binary(ref)
        binary.parent.mkdir(parents=True, exist_ok=True)
        binary.write_text("#!/bin/sh\nexit 0\n")
        binary.chmod(0o755)
        return binary

    return _make
