"""
jvmlauncher - Launch a client application in a separate JVM
Resolves the java executable, merges library directories into a
classpath, picks tuning flags from the runtime manifest and spawns the
client with inherited standard streams.
"""

from .config import (
    CommandLine,
    LaunchMode,
    LaunchRequest,
    LaunchResult,
    LauncherSettings,
)
from .exceptions import (
    ExecutableNotFoundError,
    LauncherError,
    RuntimeHomeMissingError,
    SpawnFailedError,
    WaitInterruptedError,
)
from .launcher import ProcessLauncher
from .manifest import HostOS, RuntimeManifest, RuntimeTier

__version__ = "0.1.0"

__all__ = [
    "ProcessLauncher",
    "LaunchRequest",
    "LaunchResult",
    "LaunchMode",
    "CommandLine",
    "LauncherSettings",
    "RuntimeManifest",
    "RuntimeTier",
    "HostOS",
    "LauncherError",
    "RuntimeHomeMissingError",
    "ExecutableNotFoundError",
    "SpawnFailedError",
    "WaitInterruptedError",
]
