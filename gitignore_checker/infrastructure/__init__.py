"""gitignore-checker Infrastructure Layer.

- ConfigManager: logging settings from YAML and the environment
- Logger: structured logging used by the matchers
"""

from .config_manager import ConfigError
from .config_manager import ConfigManager as Config
from .logger import Logger, LogLevel, configure_logging, get_logger, set_global_logger

__all__ = [
    "Logger",
    "LogLevel",
    "configure_logging",
    "get_logger",
    "set_global_logger",
    "ConfigError",
    "Config",
]
