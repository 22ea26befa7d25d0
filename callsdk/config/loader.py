"""Locate and read the SDK's TOML configuration files.

Two optional files are layered: ``default.toml`` and ``{env}.toml``, both in
the config directory. Either may be missing; the SDK also runs from
environment variables or constructor arguments alone.
"""

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_DIR_ENV = "CALLSDK_CONFIG_DIR"
ENVIRONMENT_ENV = "CALLSDK_ENV"
DEFAULT_ENVIRONMENT = "development"

# How many parent directories of the cwd are searched for config/
_SEARCH_DEPTH = 5


def get_config_dir() -> Path:
    """Directory holding the TOML files.

    CALLSDK_CONFIG_DIR wins when set and must exist. Otherwise the first
    ``config/`` found walking up from the working directory is used.

    Raises:
        FileNotFoundError: If CALLSDK_CONFIG_DIR names a missing directory
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        path = Path(override)
        if not path.is_dir():
            raise FileNotFoundError(f"{CONFIG_DIR_ENV} does not exist: {override}")
        return path

    start = Path.cwd()
    for directory in [start, *start.parents][:_SEARCH_DEPTH]:
        candidate = directory / "config"
        if candidate.is_dir():
            return candidate

    return Path("config")


def get_environment() -> str:
    """Name of the environment overlay, from CALLSDK_ENV."""
    return os.environ.get(ENVIRONMENT_ENV, DEFAULT_ENVIRONMENT)


def config_files(config_dir: Path | None = None, environment: str | None = None) -> list[Path]:
    """Existing config files in ascending priority.

    Args:
        config_dir: Directory to look in (defaults to get_config_dir())
        environment: Overlay name (defaults to get_environment())
    """
    directory = config_dir if config_dir is not None else get_config_dir()
    overlay = environment if environment is not None else get_environment()

    candidates = [directory / "default.toml", directory / f"{overlay}.toml"]
    return [path for path in candidates if path.is_file()]


def load_toml(file_path: Path) -> dict[str, Any]:
    """Parse one TOML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge two config tables, recursing into nested tables.

    Neither argument is modified; values in ``override`` win.
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def load_config(config_dir: Path | None = None, environment: str | None = None) -> dict[str, Any]:
    """Read and merge every config file that exists.

    Returns:
        The merged tables, or an empty dict when no file exists
    """
    merged: dict[str, Any] = {}
    for path in config_files(config_dir, environment):
        merged = deep_merge(merged, load_toml(path))
    return merged
