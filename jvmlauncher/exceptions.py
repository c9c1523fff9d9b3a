"""Custom exceptions for the JVM launcher"""


class LauncherError(Exception):
    """Base exception for launcher errors"""
    pass


class RuntimeHomeMissingError(LauncherError):
    """Raised when the configured runtime home directory does not exist"""
    pass


class ExecutableNotFoundError(LauncherError):
    """Raised when no java executable exists under the runtime home"""

    def __init__(self, message: str, directory=None):
        super().__init__(message)
        self.directory = directory


class SpawnFailedError(LauncherError):
    """Raised when the OS refuses to create the client process"""
    pass


class WaitInterruptedError(LauncherError):
    """Raised when waiting for the client process is interrupted"""
    pass
