#!/usr/bin/env python3
"""Logging configuration for gitignore-checker.

Settings are read, later sources winning, from:
- compiled defaults
- a YAML file (explicit path, or $GITIGNORE_CHECKER_CONFIG)
- GITIGNORE_CHECKER_LOGGING_LEVEL / GITIGNORE_CHECKER_LOGGING_FILE

Example file:

    gitignore_checker:
      logging:
        level: DEBUG
        file: /tmp/gitignore_checker.log
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from gitignore_checker.core.constants import CONFIG_FILE_ENV, CONFIG_ROOT_KEY, ENV_PREFIX, ErrorCode
from gitignore_checker.core.errors import GitIgnoreCheckerError

SETTINGS = ("level", "file")


class ConfigError(GitIgnoreCheckerError):
    """Configuration error."""


class ConfigManager:
    """Resolved logging settings, addressed as "logging.level" / "logging.file"."""

    DEFAULTS: Dict[str, Any] = {
        "logging.level": "INFO",
        "logging.file": None,
    }

    def __init__(self, config_file: Optional[str] = None):
        """Resolve settings from defaults, file and environment.

        Args:
            config_file: YAML file to load; $GITIGNORE_CHECKER_CONFIG if omitted

        Raises:
            ConfigError: If the file is missing or malformed
        """
        self._values = dict(self.DEFAULTS)

        config_file = config_file or os.environ.get(CONFIG_FILE_ENV)
        if config_file:
            self.load_file(config_file)

        for name in SETTINGS:
            value = os.environ.get(f"{ENV_PREFIX}LOGGING_{name.upper()}")
            if value:
                self._values[f"logging.{name}"] = value

    def load_file(self, file_path: str) -> None:
        """Load the logging section of a YAML file.

        Args:
            file_path: Path to YAML config file

        Raises:
            ConfigError: If file cannot be loaded or has the wrong shape
        """
        path = Path(file_path).expanduser()
        if not path.exists():
            raise ConfigError(f"Config file not found: {file_path}", ErrorCode.NOT_FOUND)

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"YAML parse error in {file_path}: {e}", ErrorCode.INVALID_INPUT)
        except OSError as e:
            raise ConfigError(f"Error loading config {file_path}: {e}", ErrorCode.INTERNAL_ERROR)

        section = data.get(CONFIG_ROOT_KEY, {}) if isinstance(data, dict) else None
        logging_section = section.get("logging", {}) if isinstance(section, dict) else None
        if not isinstance(logging_section, dict):
            raise ConfigError(f"Invalid config format in {file_path}", ErrorCode.INVALID_INPUT)

        for name in SETTINGS:
            if name in logging_section:
                self._values[f"logging.{name}"] = logging_section[name]

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting, or default when it is unset."""
        value = self._values.get(key)
        return default if value is None else value
