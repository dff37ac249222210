"""
Unit tests for configuration loading.
"""

import logging

import pytest
from pathlib import Path

from goversion.core.config import (
    DEFAULT_BOOTSTRAP,
    DEFAULT_INDEX_URL,
    DEFAULT_REMOTE,
    Config,
    load_config,
    load_yaml_config,
)
from goversion.core.exceptions import ConfigError


class TestLoadYamlConfig:
    """Test load_yaml_config function."""

    def test_missing_optional_file(self, tmp_path):
        assert load_yaml_config(tmp_path / "missing.yaml") == {}

    def test_missing_required_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_yaml_config(tmp_path / "missing.yaml", required=True)

    def test_empty_file(self, tmp_path):
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        assert load_yaml_config(config_file) == {}

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("remote: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_yaml_config(config_file)

    def test_non_mapping(self, tmp_path):
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="Expected a mapping"):
            load_yaml_config(config_file)


class TestLoadConfig:
    """Test load_config function."""

    def test_defaults_without_file(self):
        config = load_config()

        assert config == Config()
        assert config.remote == DEFAULT_REMOTE
        assert config.index_url == DEFAULT_INDEX_URL
        assert config.bootstrap == DEFAULT_BOOTSTRAP
        assert config.parent_dir is None

    def test_reads_user_config(self, isolated_environment):
        (isolated_environment / ".goversion.yaml").write_text(
            "remote: https://mirror.example.com/go\nlock_timeout: 30\n"
        )

        config = load_config()

        assert config.remote == "https://mirror.example.com/go"
        assert config.lock_timeout == 30.0

    def test_explicit_file(self, tmp_path):
        config_file = tmp_path / "goversion.yaml"
        config_file.write_text(f"parent_dir: {tmp_path / 'parent'}\nbootstrap: go1.4.3\n")

        config = load_config(config_file)

        assert config.parent_dir == tmp_path / "parent"
        assert config.bootstrap == "go1.4.3"

    def test_explicit_file_must_exist(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(tmp_path / "missing.yaml")

    def test_config_env_variable(self, tmp_path, monkeypatch):
        config_file = tmp_path / "env.yaml"
        config_file.write_text("index_url: https://example.com/index.txt\n")
        monkeypatch.setenv("GOVERSION_CONFIG", str(config_file))

        assert load_config().index_url == "https://example.com/index.txt"

    def test_parent_env_overrides_file(self, tmp_path, monkeypatch):
        config_file = tmp_path / "goversion.yaml"
        config_file.write_text("parent_dir: /from/file\n")
        monkeypatch.setenv("GOVERSION_PARENT", str(tmp_path / "from-env"))

        assert load_config(config_file).parent_dir == tmp_path / "from-env"

    def test_tilde_expanded(self, tmp_path, isolated_environment):
        config_file = tmp_path / "goversion.yaml"
        config_file.write_text("parent_dir: ~/go/src/golang.org/x\n")

        config = load_config(config_file)

        assert config.parent_dir == Path(isolated_environment) / "go" / "src" / "golang.org" / "x"

    def test_unknown_keys_ignored(self, tmp_path, caplog):
        config_file = tmp_path / "goversion.yaml"
        config_file.write_text("colour: blue\n")

        with caplog.at_level(logging.WARNING, logger="goversion.core.config"):
            assert load_config(config_file) == Config()
        assert "unknown configuration key: colour" in caplog.text

    @pytest.mark.parametrize(
        "content",
        ["lock_timeout: soon\n", "lock_timeout: -1\n", "remote: 42\n", "bootstrap: ''\n"],
    )
    def test_bad_values(self, tmp_path, content):
        config_file = tmp_path / "goversion.yaml"
        config_file.write_text(content)

        with pytest.raises(ConfigError):
            load_config(config_file)
