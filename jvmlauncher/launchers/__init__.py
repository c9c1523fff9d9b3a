"""Process launchers - subprocess implementation"""

from .base import BaseLauncher
from .subprocess_launcher import SubprocessLauncher

__all__ = ["BaseLauncher", "SubprocessLauncher"]
