"""
Classpath assembly

Merges the archives of two library directories into one ordered
classpath. The primary directory wins for the legacy artifact: when it
supplies at least one archive, secondary archives starting with the
legacy prefix are dropped so the same library is not loaded twice.
"""

import os
from pathlib import Path
from typing import Callable, List, Sequence, Union

from loguru import logger

from .config import DEFAULT_ARCHIVE_EXTENSION, DEFAULT_LEGACY_ARTIFACT_PREFIX

ExcludePredicate = Callable[[Path], bool]


def list_archives(
    directory: Union[str, Path],
    extension: str = DEFAULT_ARCHIVE_EXTENSION,
) -> List[Path]:
    """
    List library archives in a directory

    Missing or unreadable directories contribute nothing; one or both
    library directories are legitimately absent on fresh installs.

    Args:
        directory: Directory to scan (not recursive)
        extension: Archive file extension

    Returns:
        Absolute archive paths sorted by file name. Raw directory
        enumeration order differs between filesystems, so the listing is
        name-sorted rather than kept in directory order.
    """
    archives = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.name.endswith(extension) and entry.is_file():
                    archives.append(Path(entry.path).absolute())
    except OSError as e:
        logger.debug(f"Skipping library directory {directory}: {e}")
        return []

    archives.sort(key=lambda p: p.name)
    return archives


def legacy_artifact_filter(prefix: str = DEFAULT_LEGACY_ARTIFACT_PREFIX) -> ExcludePredicate:
    """Predicate matching archives whose file name starts with prefix"""

    def is_legacy(path: Path) -> bool:
        return path.name.startswith(prefix)

    return is_legacy


def merge_classpath(
    primary: Sequence[Path],
    secondary: Sequence[Path],
    exclude: ExcludePredicate,
) -> List[Path]:
    """
    Merge two archive listings

    Args:
        primary: Archives from the primary directory
        secondary: Archives from the secondary directory
        exclude: Applied to secondary entries only, and only when primary
            is non-empty

    Returns:
        Primary entries followed by the (filtered) secondary entries
    """
    if not primary:
        return list(secondary)

    return list(primary) + [entry for entry in secondary if not exclude(entry)]


def build_classpath(
    primary_dir: Union[str, Path],
    secondary_dir: Union[str, Path],
    extension: str = DEFAULT_ARCHIVE_EXTENSION,
    legacy_prefix: str = DEFAULT_LEGACY_ARTIFACT_PREFIX,
) -> List[Path]:
    """List both directories and merge them with the legacy override"""
    primary = list_archives(primary_dir, extension)
    secondary = list_archives(secondary_dir, extension)

    entries = merge_classpath(primary, secondary, legacy_artifact_filter(legacy_prefix))
    logger.debug(
        f"Classpath: {len(primary)} primary + {len(entries) - len(primary)} secondary archives"
    )
    return entries


def join_classpath(entries: Sequence[Union[str, Path]], separator: str = os.pathsep) -> str:
    return separator.join(str(entry) for entry in entries)
