"""
Pytest Configuration and Shared Fixtures

Provides common fixtures for all launcher tests.
"""

import shutil
import tempfile
from pathlib import Path
from typing import List
from unittest.mock import MagicMock

import pytest
from loguru import logger

from jvmlauncher.config import CommandLine, LauncherSettings
from jvmlauncher.launchers import BaseLauncher
from jvmlauncher.manifest import HostOS, RuntimeManifest


# ============================================================================
# Temporary Directory Fixtures
# ============================================================================

@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    temp = tempfile.mkdtemp()
    yield Path(temp)
    shutil.rmtree(temp, ignore_errors=True)


@pytest.fixture
def make_archives():
    """Create empty archive files in a directory, returning their paths."""
    def _make(directory: Path, *names: str) -> List[Path]:
        directory.mkdir(parents=True, exist_ok=True)
        paths = []
        for name in names:
            path = directory / name
            path.write_bytes(b"PK")
            paths.append(path.absolute())
        return paths

    return _make


@pytest.fixture
def java_home(temp_dir):
    """Create a fake runtime home with bin/java and a release file."""
    home = temp_dir / "jre"
    (home / "bin").mkdir(parents=True)
    (home / "bin" / "java").write_text("#!/bin/sh\n")
    (home / "release").write_text('IMPLEMENTOR="Eclipse Adoptium"\nJAVA_VERSION="17.0.2"\n')
    return home


@pytest.fixture
def settings(java_home):
    """Launcher settings pointing at the fake runtime home."""
    return LauncherSettings(java_home=java_home, legacy_artifact_prefix="b-legacy")


# ============================================================================
# Manifest Fixtures
# ============================================================================

@pytest.fixture
def sample_manifest():
    """Manifest with Windows, macOS, generic modern and legacy flags."""
    return RuntimeManifest.from_flags(
        modern=["-XX:+UseG1GC", "-Xmx768m"],
        legacy=["-Xmx512m", "--add-opens=java.base/java.lang=ALL-UNNAMED"],
        per_os={
            HostOS.WINDOWS: ["-XX:+DisableAttachMechanism"],
            HostOS.MACOS: ["-Xdock:name=RuneLite"],
        },
    )


# ============================================================================
# Launcher Fixtures
# ============================================================================

class RecordingLauncher(BaseLauncher):
    """Launcher double that records commands instead of spawning."""

    def __init__(self, exit_code: int = 0):
        self.spawned: List[CommandLine] = []
        self.waited = []
        self.events: List[str] = []
        self.exit_code = exit_code

    def spawn(self, command):
        self.spawned.append(command)
        self.events.append("spawn")
        process = MagicMock()
        process.pid = 4242
        return process

    def wait(self, process):
        self.waited.append(process)
        self.events.append("wait")
        return self.exit_code

    def is_running(self, pid):
        return pid == 4242 and not self.waited

    def get_launcher_type(self):
        return "recording"


@pytest.fixture
def recording_launcher():
    """Launcher double recording spawn/wait calls."""
    return RecordingLauncher()


# ============================================================================
# Logging Fixtures
# ============================================================================

@pytest.fixture
def log_records():
    """Capture loguru records emitted during a test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
