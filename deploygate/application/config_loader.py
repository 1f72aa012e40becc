from pathlib import Path
from typing import Any

import yaml


CONFIG_DIR_NAME = ".deploygate"
CONFIG_FILE_NAME = "config.yml"


class ConfigLoadError(Exception):
    def __init__(self, message: str, *, path: Path | None = None, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.cause = cause

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message}: {self.path}"


def _defaults() -> dict[str, Any]:
    return {
        "root_directory": None,  # Relative to the deployment path
        "color": None,  # None = auto-detect TTY
    }


def _load_yaml_mapping(path: Path) -> dict[str, Any]:
    """
    Load YAML file and ensure root is a mapping.
    """
    # Protect against TOCTOU race conditions.
    try:
        raw = path.read_text(encoding="utf-8")
    except (FileNotFoundError, NotADirectoryError):
        return {}
    except Exception as e:
        raise ConfigLoadError("Failed to read config file", path=path, cause=e) from e

    try:
        data = yaml.safe_load(raw)
    except Exception as e:
        raise ConfigLoadError("Malformed YAML", path=path, cause=e) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigLoadError("YAML root must be a mapping", path=path)

    return data


def _check_types(cfg: dict[str, Any], path: Path) -> None:
    root_directory = cfg.get("root_directory")
    if root_directory is not None and not isinstance(root_directory, str):
        raise ConfigLoadError("'root_directory' must be a string", path=path)

    color = cfg.get("color")
    if color is not None and not isinstance(color, bool):
        raise ConfigLoadError("'color' must be true or false", path=path)


def config_path(base: Path) -> Path:
    return base / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def load_config(*, project_root: Path | None = None, user_home: Path | None = None) -> dict[str, Any]:
    """
    Load and merge config with precedence (highest wins):
    CLI args (handled in CLI) > project > user > defaults.

    Files:
      - user:    user_home/.deploygate/config.yml
      - project: project_root/.deploygate/config.yml
    """
    project_root = project_root or Path.cwd()
    user_home = user_home or Path.home()

    cfg: dict[str, Any] = _defaults()

    for path in (config_path(user_home), config_path(project_root)):
        layer = _load_yaml_mapping(path)
        _check_types(layer, path)
        cfg = {**cfg, **layer}

    return cfg
