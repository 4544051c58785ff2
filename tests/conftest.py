"""Shared pytest fixtures for gitignore-checker tests."""
import logging
import os
from pathlib import Path
from typing import Any, Dict, Generator, List
from unittest.mock import patch

import pytest
import yaml

from gitignore_checker.core.constants import ENV_PREFIX
from gitignore_checker.infrastructure import logger as logger_module
from gitignore_checker.infrastructure.logger import Logger, LogLevel, set_global_logger


class ListHandler(logging.Handler):
    """Handler keeping formatted messages in memory."""

    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.messages: List[str] = []
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)
        self.messages.append(record.getMessage())


@pytest.fixture
def captured_logs() -> ListHandler:
    """Install a DEBUG global logger writing into a ListHandler."""
    handler = ListHandler()
    set_global_logger(Logger(level=LogLevel.DEBUG, handlers=[handler]))
    return handler


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Run without any GITIGNORE_CHECKER_* environment variables."""
    env = {k: v for k, v in os.environ.items() if not k.startswith(ENV_PREFIX)}
    with patch.dict(os.environ, env, clear=True):
        yield


@pytest.fixture
def sample_config() -> Dict[str, Any]:
    """Provide a sample gitignore-checker configuration."""
    return {
        "gitignore_checker": {
            "logging": {
                "level": "DEBUG",
                "file": None,
            }
        }
    }


@pytest.fixture
def config_file(tmp_path: Path, sample_config: Dict[str, Any]) -> Path:
    """Create a configuration file."""
    config_path = tmp_path / "gitignore_checker.yaml"
    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(sample_config, f)
    return config_path


@pytest.fixture(autouse=True)
def reset_singletons() -> Generator[None, None, None]:
    """Reset the global logger between tests."""
    yield
    logger_module._global_logger = None
