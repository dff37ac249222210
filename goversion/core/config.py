"""
Configuration loading for goversion.

Settings come from an optional YAML file. Every key is optional and the
defaults reproduce the upstream Go endpoints, so goversion works without
any configuration at all.

Lookup order for the file:
    1. --config PATH on the command line
    2. $GOVERSION_CONFIG
    3. ~/.goversion.yaml

Example file:

    remote: https://go.googlesource.com/go
    bootstrap: release-branch.go1.4
    parent_dir: ~/src/golang.org/x
    lock_timeout: 600
"""

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from goversion.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_REMOTE = "https://go.googlesource.com/go"
DEFAULT_INDEX_URL = "https://storage.googleapis.com/go-builder-data/dl-index.txt"
DEFAULT_DOWNLOAD_URL = "https://storage.googleapis.com/golang/"
DEFAULT_BOOTSTRAP = "release-branch.go1.4"

CONFIG_ENV = "GOVERSION_CONFIG"
PARENT_ENV = "GOVERSION_PARENT"


def default_config_path() -> Path:
    """Return the per-user configuration file path."""
    return Path.home() / ".goversion.yaml"


@dataclass(frozen=True)
class Config:
    """
    Effective goversion settings.

    Attributes:
        remote: Source-control remote of the toolchain repository
        index_url: Plaintext index of prebuilt binary artifacts
        download_url: Base URL artifacts are downloaded from
        bootstrap: Reference used to bootstrap newer builds
        parent_dir: Toolchain parent directory (None: derive from `go env`)
        lock_timeout: Seconds to wait for the workspace lock
        http_timeout: Seconds before an HTTP request gives up
    """

    remote: str = DEFAULT_REMOTE
    index_url: str = DEFAULT_INDEX_URL
    download_url: str = DEFAULT_DOWNLOAD_URL
    bootstrap: str = DEFAULT_BOOTSTRAP
    parent_dir: Optional[Path] = None
    lock_timeout: float = 600
    http_timeout: float = 60


def load_yaml_config(config_file: Path, required: bool = False) -> Dict[str, Any]:
    """
    Load and parse a YAML configuration file.

    Args:
        config_file: Path to YAML configuration file
        required: If True, raise error if file doesn't exist

    Returns:
        Configuration dictionary (empty dict if file doesn't exist and not required)

    Raises:
        ConfigError: If the file is required but missing, or is not valid YAML
    """
    if not config_file.exists():
        if required:
            raise ConfigError(f"Configuration file not found: {config_file}")
        logger.debug(f"Config file not found (optional): {config_file}")
        return {}

    logger.debug(f"Loading configuration from {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_file}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping in {config_file}, got {type(data).__name__}")
    return data


def _coerce(key: str, value: Any) -> Any:
    if key == "parent_dir":
        return Path(os.path.expanduser(str(value)))
    if key in ("lock_timeout", "http_timeout"):
        try:
            number = float(value)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"{key} must be a number, got {value!r}") from e
        if number <= 0:
            raise ConfigError(f"{key} must be positive, got {value!r}")
        return number
    if not isinstance(value, str) or not value:
        raise ConfigError(f"{key} must be a non-empty string, got {value!r}")
    return value


def load_config(config_file: Optional[Path] = None) -> Config:
    """
    Build the effective configuration.

    Args:
        config_file: Explicit configuration file (from --config). An explicit
            file must exist; the implicit locations are optional.

    Returns:
        Config with file values and environment overrides applied

    Raises:
        ConfigError: If the file is invalid or holds a bad value
    """
    required = config_file is not None
    if config_file is None:
        env_path = os.environ.get(CONFIG_ENV)
        if env_path:
            config_file = Path(env_path)
            required = True
        else:
            config_file = default_config_path()

    data = load_yaml_config(Path(config_file), required=required)

    known = {f.name for f in fields(Config)}
    values: Dict[str, Any] = {}
    for key, value in data.items():
        if key not in known:
            logger.warning(f"Ignoring unknown configuration key: {key}")
            continue
        if value is None:
            continue
        values[key] = _coerce(key, value)

    parent_override = os.environ.get(PARENT_ENV)
    if parent_override:
        values["parent_dir"] = _coerce("parent_dir", parent_override)

    return replace(Config(), **values)


__all__ = [
    "Config",
    "load_config",
    "load_yaml_config",
    "default_config_path",
    "DEFAULT_REMOTE",
    "DEFAULT_INDEX_URL",
    "DEFAULT_DOWNLOAD_URL",
    "DEFAULT_BOOTSTRAP",
]
