"""Subprocess launcher with inherited standard streams"""

import subprocess

import psutil
from loguru import logger

from .base import BaseLauncher
from ..config import CommandLine
from ..exceptions import SpawnFailedError, WaitInterruptedError


class SubprocessLauncher(BaseLauncher):
    """
    Launch the client as a plain subprocess
    stdin/stdout/stderr are inherited, nothing is captured
    """

    def spawn(self, command: CommandLine) -> subprocess.Popen:
        """
        Launch process as subprocess

        Args:
            command: Full command line

        Returns:
            Popen handle of the started process

        Raises:
            SpawnFailedError: If launch fails
        """
        try:
            proc = subprocess.Popen(command.to_list())
        except FileNotFoundError as e:
            raise SpawnFailedError(f"Command not found: {command.executable}") from e
        except (OSError, ValueError) as e:
            raise SpawnFailedError(f"Failed to launch {command.executable}: {e}") from e

        logger.debug(f"Client launched with PID {proc.pid}")
        return proc

    def wait(self, process: subprocess.Popen) -> int:
        """Wait for the client to exit; interruption is fatal"""
        try:
            exit_code = process.wait()
        except KeyboardInterrupt as e:
            raise WaitInterruptedError(
                f"Interrupted while waiting for client (PID: {process.pid})"
            ) from e

        logger.debug(f"Client (PID: {process.pid}) exited with code {exit_code}")
        return exit_code

    def is_running(self, pid: int) -> bool:
        """Check if process is running"""
        try:
            proc = psutil.Process(pid)
            return proc.is_running() and proc.status() != psutil.STATUS_ZOMBIE
        except psutil.NoSuchProcess:
            return False
        except (psutil.AccessDenied, psutil.ZombieProcess, OSError):
            # Cannot determine process status due to access or OS errors
            return False

    def get_launcher_type(self) -> str:
        """Get launcher type"""
        return "subprocess"
