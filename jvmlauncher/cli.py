"""
Command-line entry point

Launches the client from a bootstrap document on disk:

    jvmlauncher --manifest bootstrap.json --repo ~/.runelite/repository2
        --fallback-repo ./lib -J-Xmx768m -D runelite.launcher.version=2.7.0 --debug -- --safe-mode

JVM flags start with a dash, so pass them attached (-J-Xmx768m) or as
--jvm-arg=-Xmx768m.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List, Optional

from loguru import logger
from pydantic import ValidationError

from .config import LaunchRequest, LauncherSettings
from .env_manager import EnvManager
from .exceptions import SpawnFailedError
from .launcher import ProcessLauncher
from .logging_config import LogConfig, setup_logging
from .manifest import RuntimeManifest


def parse_properties(values: List[str]) -> Dict[str, str]:
    """Turn repeated key=value options into a mapping (later keys win)"""
    props: Dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not key or not sep:
            raise argparse.ArgumentTypeError(f"Invalid property (expected key=value): {item}")
        props[key] = value
    return props


def load_manifest(path: Optional[Path]) -> RuntimeManifest:
    """Read a bootstrap JSON document; no file means no tuning flags"""
    if path is None:
        return RuntimeManifest()

    with open(path, encoding="utf-8") as f:
        return RuntimeManifest.from_bootstrap(json.load(f))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jvmlauncher",
        description="Launch the client in a separate JVM",
    )
    parser.add_argument("--manifest", type=Path, help="Bootstrap JSON with JVM arguments")
    parser.add_argument("--repo", type=Path, required=True, help="Primary library directory")
    parser.add_argument("--fallback-repo", type=Path, required=True, help="Secondary library directory")
    parser.add_argument("--java-home", type=Path, help="Runtime home (defaults to JAVA_HOME)")
    parser.add_argument("--runtime-version", type=int, help="Runtime major version (read from release file if omitted)")
    parser.add_argument("-J", "--jvm-arg", action="append", default=[], dest="jvm_args",
                        help="Extra JVM flag (repeatable)")
    parser.add_argument("-D", "--property", action="append", default=[], dest="properties",
                        help="System property key=value (repeatable)")
    parser.add_argument("--debug", action="store_true", help="Debug logging; wait for the client to exit")
    parser.add_argument("--env-file", type=Path, help="Load settings from a .env file")
    parser.add_argument("client_args", nargs="*", help="Arguments passed to the client (after --)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the launcher

    Returns:
        Exit code: the client's on the blocking path, 0 after a detached
        launch, 1 when the launch could not start
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    env = EnvManager(env_file=args.env_file, auto_load=args.env_file is not None)
    try:
        settings = LauncherSettings.from_env(env)
    except ValidationError as e:
        logger.error(f"Invalid launcher settings: {e}")
        return 1

    if args.debug:
        settings = settings.model_copy(update={"log_level": "DEBUG"})

    setup_logging(LogConfig(level=settings.log_level))

    try:
        props = parse_properties(args.properties)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    try:
        manifest = load_manifest(args.manifest)
    except (OSError, ValueError) as e:
        logger.error(f"Unable to read manifest {args.manifest}: {e}")
        return 1

    request = LaunchRequest(
        manifest=manifest,
        primary_dir=args.repo,
        secondary_dir=args.fallback_repo,
        client_args=args.client_args,
        jvm_props=props,
        jvm_args=args.jvm_args,
        java_home=args.java_home,
        runtime_major_version=args.runtime_version,
    )

    try:
        result = ProcessLauncher(settings=settings).launch(request, mode=settings.launch_mode)
    except SpawnFailedError as e:
        logger.error(f"Launch failed: {e}")
        return 1

    if not result.success:
        return 1
    if result.exit_code is not None:
        return result.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())
