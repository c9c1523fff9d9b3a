"""Runtime resolution - java executable and version lookup"""

import re
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from .exceptions import ExecutableNotFoundError, RuntimeHomeMissingError

# Checked in order: Windows name first, then the generic one
EXECUTABLE_NAMES = ("java.exe", "java")

_RELEASE_VERSION = re.compile(r'^JAVA_VERSION\s*=\s*"?([^"\s]+)"?\s*$', re.MULTILINE)


def resolve_java_executable(java_home: Optional[Union[str, Path]]) -> Path:
    """
    Locate the java executable inside a runtime home

    Args:
        java_home: Runtime installation directory

    Returns:
        Absolute path to bin/java.exe or bin/java

    Raises:
        RuntimeHomeMissingError: If java_home is unset or does not exist
        ExecutableNotFoundError: If neither executable name exists in bin/
    """
    if java_home is None or str(java_home) == "":
        raise RuntimeHomeMissingError("JAVA_HOME is not set")

    home = Path(java_home)
    if not home.exists():
        raise RuntimeHomeMissingError(
            f'JAVA_HOME is not set correctly! directory "{home}" does not exist.'
        )

    bin_dir = home / "bin"
    for name in EXECUTABLE_NAMES:
        candidate = bin_dir / name
        if candidate.exists():
            return candidate.absolute()

    raise ExecutableNotFoundError(
        f'java executable not found in directory "{bin_dir}"', directory=bin_dir
    )


def read_runtime_version(java_home: Union[str, Path]) -> Optional[str]:
    """
    Read JAVA_VERSION from the runtime's release file

    Returns:
        Version string such as "17.0.2" or "1.8.0_292", None if unavailable
    """
    release_file = Path(java_home) / "release"
    try:
        content = release_file.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.debug(f"Cannot read {release_file}: {e}")
        return None

    match = _RELEASE_VERSION.search(content)
    return match.group(1) if match else None


def parse_major_version(version: Optional[str]) -> Optional[int]:
    """
    Extract the major version from a java version string

    Handles both the legacy "1.x" scheme (1.8.0_292 -> 8) and the
    current one (17.0.2 -> 17, 21-ea -> 21).
    """
    if not version:
        return None

    match = re.match(r"(\d+)(?:\.(\d+))?", version.strip())
    if not match:
        return None

    major = int(match.group(1))
    if major == 1 and match.group(2) is not None:
        return int(match.group(2))
    return major


def detect_major_version(java_home: Union[str, Path]) -> Optional[int]:
    """Major version of the runtime installed at java_home, if known"""
    major = parse_major_version(read_runtime_version(java_home))
    if major is None:
        logger.debug(f"Could not determine runtime version of {java_home}")
    return major
