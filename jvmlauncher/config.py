"""Configuration and value classes for launching the client JVM"""

import subprocess
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .env_manager import EnvManager
from .exceptions import LauncherError
from .logging_config import LogLevel
from .manifest import HostOS, RuntimeManifest

DEFAULT_MAIN_CLASS = "net.runelite.client.RuneLite"
DEFAULT_ARCHIVE_EXTENSION = ".jar"
# Secondary-directory artifact superseded by the primary directory
DEFAULT_LEGACY_ARTIFACT_PREFIX = "runelite-api-1.10"

PathLike = Union[str, Path]

_VERBOSE_LEVELS = {"TRACE", "DEBUG"}


class LaunchMode(str, Enum):
    """Whether launch() returns right after spawning or waits for exit"""
    DETACHED = "detached"
    BLOCKING = "blocking"

    @classmethod
    def for_log_level(cls, level: str) -> "LaunchMode":
        """Debug logging keeps the launcher attached to the client"""
        if str(level).upper() in _VERBOSE_LEVELS:
            return cls.BLOCKING
        return cls.DETACHED


@dataclass
class LaunchRequest:
    """Everything the caller supplies for a single launch"""

    # Required
    manifest: RuntimeManifest
    primary_dir: PathLike
    secondary_dir: PathLike

    # Arguments
    client_args: List[str] = field(default_factory=list)
    jvm_props: Dict[str, str] = field(default_factory=dict)
    jvm_args: List[str] = field(default_factory=list)

    # Overrides (settings / detection when None)
    java_home: Optional[PathLike] = None
    runtime_major_version: Optional[int] = None
    host_os: Optional[HostOS] = None


@dataclass(frozen=True)
class CommandLine:
    """Final argv handed to process creation"""

    arguments: Tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "arguments", tuple(self.arguments))

    @property
    def executable(self) -> str:
        return self.arguments[0]

    def to_list(self) -> List[str]:
        return list(self.arguments)

    def __iter__(self):
        return iter(self.arguments)

    def __len__(self) -> int:
        return len(self.arguments)

    def __str__(self) -> str:
        return "[" + ", ".join(self.arguments) + "]"


@dataclass
class LaunchResult:
    """Outcome of a launch: a spawned process or a failure"""

    command: Optional[CommandLine] = None
    process: Optional[subprocess.Popen] = None
    mode: LaunchMode = LaunchMode.DETACHED

    # Set on the blocking path once the client exits
    exit_code: Optional[int] = None

    error: Optional[LauncherError] = None

    @property
    def success(self) -> bool:
        return self.error is None and self.process is not None

    @property
    def pid(self) -> Optional[int]:
        return self.process.pid if self.process is not None else None

    def to_dict(self) -> dict:
        """Convert to dictionary for reporting"""
        return {
            "success": self.success,
            "pid": self.pid,
            "mode": self.mode.value,
            "command": self.command.to_list() if self.command else None,
            "exit_code": self.exit_code,
            "error": str(self.error) if self.error else None,
            "error_type": type(self.error).__name__ if self.error else None,
        }


class LauncherSettings(BaseModel):
    """Installation-level launcher settings"""

    java_home: Optional[Path] = Field(
        default=None,
        description="Runtime home containing bin/java"
    )
    main_class: str = Field(
        default=DEFAULT_MAIN_CLASS,
        description="Entry point of the client application"
    )
    legacy_artifact_prefix: str = Field(
        default=DEFAULT_LEGACY_ARTIFACT_PREFIX,
        description="Secondary-dir archive prefix dropped when the primary dir is populated"
    )
    archive_extension: str = Field(
        default=DEFAULT_ARCHIVE_EXTENSION,
        description="File extension of library archives"
    )
    log_level: str = Field(default="INFO", description="Launcher log level")

    model_config = ConfigDict(frozen=True)

    @field_validator("archive_extension")
    @classmethod
    def validate_archive_extension(cls, v):
        if not v:
            raise ValueError("archive_extension cannot be empty")
        return v if v.startswith(".") else f".{v}"

    @field_validator("legacy_artifact_prefix")
    @classmethod
    def validate_legacy_artifact_prefix(cls, v):
        # An empty prefix would match every secondary archive
        if not v.strip():
            raise ValueError("legacy_artifact_prefix cannot be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = str(v).strip().upper()
        if level not in LogLevel.__members__:
            raise ValueError(
                f"Invalid log level: {v} (expected one of {', '.join(LogLevel.__members__)})"
            )
        return level

    @property
    def launch_mode(self) -> LaunchMode:
        return LaunchMode.for_log_level(self.log_level)

    @classmethod
    def from_env(cls, env: Optional[EnvManager] = None) -> "LauncherSettings":
        """Create LauncherSettings from environment variables"""
        env = env or EnvManager()
        return cls(
            java_home=env.get_path("JAVA_HOME"),
            main_class=env.get_str("LAUNCHER_MAIN_CLASS", default=DEFAULT_MAIN_CLASS),
            legacy_artifact_prefix=env.get_str(
                "LAUNCHER_LEGACY_ARTIFACT_PREFIX", default=DEFAULT_LEGACY_ARTIFACT_PREFIX
            ),
            archive_extension=env.get_str(
                "LAUNCHER_ARCHIVE_EXTENSION", default=DEFAULT_ARCHIVE_EXTENSION
            ),
            log_level=env.get_str("LAUNCHER_LOG_LEVEL", default="INFO"),
        )
