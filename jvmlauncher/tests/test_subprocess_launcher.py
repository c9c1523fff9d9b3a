"""Tests for the subprocess backend (spawns real child processes)"""

import os
import sys
from unittest.mock import MagicMock

import pytest

from jvmlauncher.config import CommandLine
from jvmlauncher.exceptions import SpawnFailedError, WaitInterruptedError
from jvmlauncher.launchers import SubprocessLauncher


@pytest.fixture
def launcher():
    return SubprocessLauncher()


def test_spawn_and_wait(launcher):
    process = launcher.spawn(CommandLine((sys.executable, "-c", "import sys; sys.exit(5)")))

    assert process.pid > 0
    assert launcher.wait(process) == 5


def test_streams_are_inherited(launcher):
    process = launcher.spawn(CommandLine((sys.executable, "-c", "pass")))
    launcher.wait(process)

    assert process.stdin is None
    assert process.stdout is None
    assert process.stderr is None


def test_missing_executable(launcher, temp_dir):
    missing = str(temp_dir / "bin" / "java")

    with pytest.raises(SpawnFailedError, match="Command not found") as exc_info:
        launcher.spawn(CommandLine((missing, "-version")))

    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_invalid_argument(launcher):
    with pytest.raises(SpawnFailedError):
        launcher.spawn(CommandLine((sys.executable, "-c", "pass\0")))


def test_wait_interrupted(launcher):
    process = MagicMock(pid=99)
    process.wait.side_effect = KeyboardInterrupt()

    with pytest.raises(WaitInterruptedError, match="PID: 99") as exc_info:
        launcher.wait(process)

    assert isinstance(exc_info.value.__cause__, KeyboardInterrupt)


def test_is_running(launcher):
    assert launcher.is_running(os.getpid())


def test_is_not_running_after_exit(launcher):
    process = launcher.spawn(CommandLine((sys.executable, "-c", "pass")))
    launcher.wait(process)

    assert not launcher.is_running(process.pid)


def test_launcher_type(launcher):
    assert launcher.get_launcher_type() == "subprocess"
