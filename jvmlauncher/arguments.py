"""JVM argument planning and command-line composition"""

from pathlib import Path
from typing import Iterable, Mapping, Optional, Sequence, Tuple, Union

from .classpath import join_classpath
from .config import CommandLine
from .manifest import HostOS, RuntimeManifest, RuntimeTier

ASSERTIONS_FLAG = "-ea"
CLASSPATH_FLAG = "-cp"
DEVELOPER_MODE_FLAG = "--developer-mode"

# Tiers whose flags may be specialised per host OS
OS_SPECIALIZED_TIERS = frozenset({RuntimeTier.MODERN})


def select_tuning_flags(
    manifest: RuntimeManifest,
    host_os: HostOS,
    tier: RuntimeTier,
) -> Optional[Tuple[str, ...]]:
    """
    Pick the tuning flags for a host OS and runtime tier

    Lookup order: (tier, os) for OS-specialised tiers, then (tier, generic).
    A level that is defined wins even when its list is empty.

    Returns:
        Flag tuple, or None when the manifest defines neither level
    """
    if tier in OS_SPECIALIZED_TIERS and manifest.has(tier, host_os):
        return manifest.get(tier, host_os)
    return manifest.get(tier, None)


def format_system_properties(props: Mapping[str, str]) -> Tuple[str, ...]:
    """-D<key>=<value> for each property, in mapping order"""
    return tuple(f"-D{key}={value}" for key, value in props.items())


def build_command_line(
    java_executable: Union[str, Path],
    classpath: Sequence[Union[str, Path]],
    tuning_flags: Optional[Iterable[str]],
    jvm_props: Mapping[str, str],
    jvm_args: Iterable[str],
    main_class: str,
    client_args: Iterable[str],
) -> CommandLine:
    """
    Compose the client's full command line

    Order: executable, assertions flag, classpath, tuning flags, system
    properties, extra JVM flags, main class, developer-mode flag, client
    arguments.
    """
    arguments = [str(java_executable), ASSERTIONS_FLAG, CLASSPATH_FLAG, join_classpath(classpath)]

    if tuning_flags is not None:
        arguments.extend(tuning_flags)
    arguments.extend(format_system_properties(jvm_props))
    arguments.extend(jvm_args)

    arguments.append(main_class)
    arguments.append(DEVELOPER_MODE_FLAG)
    arguments.extend(client_args)

    return CommandLine(tuple(arguments))
