#!/usr/bin/env python3
"""
Environment Manager - Environment variable access for the launcher

Provides typed getters over os.environ with optional loading of a .env
file, so launcher settings can be supplied per installation without
touching the shell profile.

Usage:
    from jvmlauncher.env_manager import EnvManager

    env = EnvManager()
    java_home = env.get_path("JAVA_HOME")
    main_class = env.get_str("LAUNCHER_MAIN_CLASS", default="net.runelite.client.RuneLite")
"""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dotenv import dotenv_values, load_dotenv
from loguru import logger


class EnvManager:
    """
    Typed environment variable reader

    Reads from os.environ by default; tests and embedders can pass an
    explicit mapping instead.
    """

    def __init__(
        self,
        env_file: Optional[Path] = None,
        auto_load: bool = False,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize environment manager

        Args:
            env_file: Path to .env file (defaults to ./.env)
            auto_load: If True, load the .env file immediately
            environ: Mapping to read instead of os.environ (copied)
        """
        self.env_file = env_file if env_file is not None else Path.cwd() / ".env"
        self._environ: Optional[Dict[str, str]] = dict(environ) if environ is not None else None
        self._loaded = False

        if auto_load:
            self.load_env_file()

    @property
    def environ(self) -> Mapping[str, str]:
        return self._environ if self._environ is not None else os.environ

    def load_env_file(self, override: bool = False) -> bool:
        """
        Load environment variables from the .env file

        With an explicit mapping the file is merged into that mapping;
        otherwise it is loaded into os.environ.

        Args:
            override: If True, override existing variables

        Returns:
            True if the file was loaded, False otherwise
        """
        if not self.env_file.exists():
            logger.debug(f".env file not found: {self.env_file}")
            return False

        if self._environ is not None:
            for key, value in dotenv_values(self.env_file).items():
                if value is not None and (override or key not in self._environ):
                    self._environ[key] = value
            self._loaded = True
        else:
            self._loaded = load_dotenv(self.env_file, override=override)

        if self._loaded:
            logger.info(f"Loaded .env file: {self.env_file}")
        return self._loaded

    # ========================================================================
    # Type-safe getters
    # ========================================================================

    def get(self, key: str, default: Any = None, required: bool = False) -> Any:
        """
        Get environment variable

        Args:
            key: Environment variable name
            default: Default value if not found
            required: If True, raise KeyError if not found

        Returns:
            Environment variable value or default
        """
        value = self.environ.get(key)

        if value is None:
            if required:
                raise KeyError(f"Required environment variable not found: {key}")
            return default

        return value

    def get_str(self, key: str, default: str = "", required: bool = False) -> str:
        """Get string environment variable"""
        value = self.get(key, default, required)
        return str(value) if value is not None else default

    def get_path(
        self,
        key: str,
        default: Optional[Path] = None,
        required: bool = False,
    ) -> Optional[Path]:
        """
        Get Path environment variable with ~ and $VAR expansion

        Returns:
            Expanded Path, or default when the variable is unset or empty
        """
        value = self.get_str(key, required=required)

        if not value:
            return default

        expanded = os.path.expanduser(os.path.expandvars(value))
        return Path(expanded)
