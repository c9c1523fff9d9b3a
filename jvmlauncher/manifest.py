"""
Runtime manifest model

The bootstrap document served alongside the client lists JVM tuning flags
per runtime generation and, for the modern generation, per host OS. This
module holds those flags in a lookup table keyed by (tier, os); an os of
None marks the generic set for that tier.

The manifest arrives already validated, so nothing here checks the flags
themselves.
"""

import platform
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

MODERN_RUNTIME_MAJOR = 17


class HostOS(str, Enum):
    """Host operating system families the manifest distinguishes"""
    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"
    OTHER = "other"

    @classmethod
    def detect(cls, system: Optional[str] = None) -> "HostOS":
        """
        Detect the host OS

        Args:
            system: Value of platform.system() (read when not given)

        Returns:
            Matching HostOS member, OTHER when unrecognised
        """
        if system is None:
            system = platform.system()

        name = system.lower()
        if name.startswith("windows") or name.startswith("cygwin"):
            return cls.WINDOWS
        if name == "darwin":
            return cls.MACOS
        if name == "linux":
            return cls.LINUX
        return cls.OTHER


class RuntimeTier(str, Enum):
    """Runtime generations with their own flag sets"""
    MODERN = "jvm17"
    LEGACY = "jvm9"

    @classmethod
    def for_major(cls, major: Optional[int]) -> "RuntimeTier":
        """Map a runtime major version onto a tier (unknown means legacy)"""
        if major is not None and major >= MODERN_RUNTIME_MAJOR:
            return cls.MODERN
        return cls.LEGACY


FlagKey = Tuple[RuntimeTier, Optional[HostOS]]

# bootstrap field name -> table key
BOOTSTRAP_FIELDS: Dict[str, FlagKey] = {
    "clientJvm17WindowsArguments": (RuntimeTier.MODERN, HostOS.WINDOWS),
    "clientJvm17MacArguments": (RuntimeTier.MODERN, HostOS.MACOS),
    "clientJvm17Arguments": (RuntimeTier.MODERN, None),
    "clientJvm9Arguments": (RuntimeTier.LEGACY, None),
}


@dataclass(frozen=True)
class RuntimeManifest:
    """Tuning flags per (tier, os) supplied by the bootstrap collaborator"""

    flags: Mapping[FlagKey, Tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self):
        # Freeze every flag list so callers cannot mutate the table
        frozen = {key: tuple(value) for key, value in self.flags.items()}
        object.__setattr__(self, "flags", frozen)

    def get(self, tier: RuntimeTier, host_os: Optional[HostOS] = None) -> Optional[Tuple[str, ...]]:
        """Flags defined at exactly this level, or None when absent"""
        return self.flags.get((tier, host_os))

    def has(self, tier: RuntimeTier, host_os: Optional[HostOS] = None) -> bool:
        return (tier, host_os) in self.flags

    @classmethod
    def from_flags(
        cls,
        modern: Optional[Sequence[str]] = None,
        legacy: Optional[Sequence[str]] = None,
        per_os: Optional[Mapping[HostOS, Sequence[str]]] = None,
    ) -> "RuntimeManifest":
        """
        Build a manifest from plain flag lists

        Args:
            modern: Generic flags for the modern tier
            legacy: Generic flags for the legacy tier
            per_os: OS-specific flags for the modern tier

        Returns:
            RuntimeManifest with only the given levels defined
        """
        flags: Dict[FlagKey, Sequence[str]] = {}
        if modern is not None:
            flags[(RuntimeTier.MODERN, None)] = modern
        if legacy is not None:
            flags[(RuntimeTier.LEGACY, None)] = legacy
        for host_os, os_flags in (per_os or {}).items():
            if os_flags is not None:
                flags[(RuntimeTier.MODERN, host_os)] = os_flags
        return cls(flags=flags)

    @classmethod
    def from_bootstrap(cls, bootstrap: Mapping[str, Any]) -> "RuntimeManifest":
        """
        Map the bootstrap document's argument fields onto the flag table

        Fields that are missing or null stay undefined; unrelated fields
        are ignored.

        Raises:
            ValueError: If an argument field is not a list of flags
        """
        flags: Dict[FlagKey, Sequence[str]] = {}
        for field_name, key in BOOTSTRAP_FIELDS.items():
            value = bootstrap.get(field_name)
            if value is None:
                continue
            if not isinstance(value, (list, tuple)):
                raise ValueError(
                    f"{field_name} must be a list of flags, got {type(value).__name__}"
                )
            flags[key] = [str(flag) for flag in value]
        return cls(flags=flags)
