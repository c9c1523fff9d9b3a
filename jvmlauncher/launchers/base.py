"""Base launcher interface"""

import subprocess
from abc import ABC, abstractmethod

from ..config import CommandLine


class BaseLauncher(ABC):
    """Abstract base class for process launchers"""

    @abstractmethod
    def spawn(self, command: CommandLine) -> subprocess.Popen:
        """
        Start a process with the parent's standard streams

        Args:
            command: Full command line

        Returns:
            Handle of the started process

        Raises:
            SpawnFailedError: If the OS rejects process creation
        """
        pass

    @abstractmethod
    def wait(self, process: subprocess.Popen) -> int:
        """
        Block until the process exits

        Args:
            process: Handle returned by spawn()

        Returns:
            Exit code of the process

        Raises:
            WaitInterruptedError: If the wait is interrupted
        """
        pass

    @abstractmethod
    def is_running(self, pid: int) -> bool:
        """
        Check if process is running

        Args:
            pid: Process ID

        Returns:
            True if running, False otherwise
        """
        pass

    @abstractmethod
    def get_launcher_type(self) -> str:
        """
        Get launcher type identifier

        Returns:
            e.g. 'subprocess'
        """
        pass
