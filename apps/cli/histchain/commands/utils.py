"""Utility functions for histchain CLI commands.

Execution Context:
    CLI command utilities - imported by main.py and command modules

Dependencies:
    - os: Environment variable access
    - logging: Log output configuration
    - histchain_core.models: HistoryConfig

Metadata:
    Version: 0.1.0
    Author: histchain Team
"""
from __future__ import annotations

import logging
import os
from pathlib import Path

from histchain_core.models import HistoryConfig

# Environment variables that override config file values
ENV_NAME = "HISTCHAIN_NAME"
ENV_LOG_LEVEL = "HISTCHAIN_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def load_config(config_path: Path | str | None = None) -> HistoryConfig:
    """Build CLI configuration from file and environment.

    Environment variables take precedence over the config file, which
    takes precedence over built-in defaults.

    Args:
        config_path: Optional path to a JSON config file.

    Returns:
        Resolved HistoryConfig.

    Raises:
        RuntimeError: If the config file cannot be loaded.
    """
    config = HistoryConfig.load(Path(config_path)) if config_path else HistoryConfig()

    env_name = os.getenv(ENV_NAME)
    if env_name:
        config.name = env_name

    env_level = os.getenv(ENV_LOG_LEVEL)
    if env_level:
        config.log_level = env_level.upper()

    return config


def configure_logging(level: str | int) -> None:
    """Route log records to stderr at the given level.

    Args:
        level: Logging level name or number.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
    )
