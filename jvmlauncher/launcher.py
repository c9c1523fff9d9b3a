"""ProcessLauncher - high-level API for launching the client JVM"""

from typing import Optional

from loguru import logger

from .arguments import build_command_line, select_tuning_flags
from .classpath import build_classpath
from .config import LaunchMode, LaunchRequest, LaunchResult, LauncherSettings
from .exceptions import ExecutableNotFoundError, RuntimeHomeMissingError
from .launchers import BaseLauncher, SubprocessLauncher
from .manifest import HostOS, RuntimeTier
from .resolver import detect_major_version, resolve_java_executable
from .splash import NullSplashScreen, SplashScreen


class ProcessLauncher:
    """
    Launches the client in a separate JVM

    Resolves the java executable, assembles the classpath, plans the JVM
    flags and spawns the process. Each launch() is independent; library
    directories are listed fresh every time.
    """

    def __init__(
        self,
        settings: Optional[LauncherSettings] = None,
        launcher: Optional[BaseLauncher] = None,
        splash: Optional[SplashScreen] = None,
    ):
        """
        Initialize process launcher

        Args:
            settings: Launcher settings (read from the environment if None)
            launcher: Process backend (SubprocessLauncher if None)
            splash: Splash screen dismissed before a blocking wait
        """
        self.settings = settings if settings is not None else LauncherSettings.from_env()
        self.launcher = launcher if launcher is not None else SubprocessLauncher()
        self.splash = splash if splash is not None else NullSplashScreen()

    def launch(self, request: LaunchRequest, mode: LaunchMode = LaunchMode.DETACHED) -> LaunchResult:
        """
        Launch the client

        Args:
            request: Directories, manifest and arguments for this launch
            mode: BLOCKING waits for the client to exit, DETACHED returns
                right after spawning

        Returns:
            LaunchResult with the process handle, or with error set when
            the java executable could not be located

        Raises:
            SpawnFailedError: If the OS rejects process creation
            WaitInterruptedError: If the blocking wait is interrupted
        """
        java_home = request.java_home if request.java_home is not None else self.settings.java_home

        try:
            java_executable = resolve_java_executable(java_home)
        except (RuntimeHomeMissingError, ExecutableNotFoundError) as e:
            logger.opt(exception=e).error("Unable to find java executable")
            return LaunchResult(mode=mode, error=e)

        classpath = build_classpath(
            request.primary_dir,
            request.secondary_dir,
            extension=self.settings.archive_extension,
            legacy_prefix=self.settings.legacy_artifact_prefix,
        )

        host_os = request.host_os if request.host_os is not None else HostOS.detect()
        major = request.runtime_major_version
        if major is None:
            major = detect_major_version(java_home)
        tier = RuntimeTier.for_major(major)

        command = build_command_line(
            java_executable,
            classpath,
            select_tuning_flags(request.manifest, host_os, tier),
            request.jvm_props,
            request.jvm_args,
            self.settings.main_class,
            request.client_args,
        )

        logger.info("Running {}", command)

        process = self.launcher.spawn(command)
        result = LaunchResult(command=command, process=process, mode=mode)

        if mode == LaunchMode.BLOCKING:
            self.splash.stop()
            result.exit_code = self.launcher.wait(process)

        return result

    def is_running(self, result: LaunchResult) -> bool:
        """Whether the client started by a launch is still alive"""
        if result.pid is None:
            return False
        return self.launcher.is_running(result.pid)
