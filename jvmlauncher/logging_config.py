"""
Logging Configuration Module

Loguru-based logging for the launcher:
- Console output (colorized, human-readable)
- Optional rotating log file
- Level shared with the launch mode (DEBUG keeps the launcher attached)

Usage:
    from jvmlauncher.logging_config import LogConfig, setup_logging

    logger = setup_logging(LogConfig(level="DEBUG"))
    logger.info("Launching client")
"""

import os
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from loguru import logger as base_logger

SERVICE_NAME = "jvmlauncher"


class LogLevel(str, Enum):
    """Log level enumeration"""
    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class LogConfig:
    """
    Logging configuration dataclass

    Attributes:
        level: Minimum log level
        console_output: Enable console logging (stderr, so the client's
            inherited stdout stays clean)
        file_output: Enable file logging
        logs_dir: Directory for log files
        rotation: File size for rotation (e.g., "10 MB")
        retention: How long to keep old logs (e.g., "7 days")
        colorize: Enable colored console output
    """
    level: LogLevel = LogLevel.INFO
    console_output: bool = True
    file_output: bool = False
    logs_dir: Optional[Path] = None

    rotation: str = "10 MB"
    retention: str = "7 days"
    colorize: bool = True

    console_format: str = field(default="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> | <level>{message}</level>")
    file_format: str = field(default="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}")

    def __post_init__(self):
        """Normalise level and logs dir"""
        if isinstance(self.level, str):
            self.level = LogLevel(self.level.upper())

        if self.logs_dir is not None and not isinstance(self.logs_dir, Path):
            self.logs_dir = Path(self.logs_dir)

    def get_log_file(self) -> Path:
        """Get path to the launcher log file"""
        return (self.logs_dir or get_logs_dir()) / f"{SERVICE_NAME}.log"


def get_logs_dir() -> Path:
    """
    Get default logs directory

    Priority:
    1. LOGS_DIR environment variable
    2. ~/.cache/jvmlauncher/logs (default)
    """
    logs_dir_str = os.getenv("LOGS_DIR")
    if logs_dir_str:
        return Path(logs_dir_str)
    return Path.home() / ".cache" / SERVICE_NAME / "logs"


def setup_logging(config: Optional[LogConfig] = None) -> Any:
    """
    Configure loguru sinks for the launcher

    Replaces any previously installed sinks, so calling it twice is safe.

    Args:
        config: LogConfig instance (None for defaults)

    Returns:
        Loguru logger bound to the launcher service name
    """
    if config is None:
        config = LogConfig()

    base_logger.remove()

    if config.console_output:
        base_logger.add(
            sys.stderr,
            level=config.level.value,
            format=config.console_format,
            colorize=config.colorize,
        )

    if config.file_output:
        log_file = config.get_log_file()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        base_logger.add(
            log_file,
            level="DEBUG",
            rotation=config.rotation,
            retention=config.retention,
            format=config.file_format,
        )

    return base_logger.bind(service=SERVICE_NAME)
