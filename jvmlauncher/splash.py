"""Splash screen collaborator interface"""

from typing import Protocol


class SplashScreen(Protocol):
    """Anything showing launch progress that can be dismissed"""

    def stop(self) -> None:
        ...


class NullSplashScreen:
    """Used when no splash screen is shown"""

    def stop(self) -> None:
        pass
