"""Tests for loguru setup"""

from loguru import logger

from jvmlauncher.logging_config import LogConfig, LogLevel, get_logs_dir, setup_logging


def test_level_is_normalised():
    assert LogConfig(level="debug").level == LogLevel.DEBUG


def test_logs_dir_from_env(temp_dir, monkeypatch):
    monkeypatch.setenv("LOGS_DIR", str(temp_dir))

    assert get_logs_dir() == temp_dir
    assert LogConfig().get_log_file() == temp_dir / "jvmlauncher.log"


def test_file_output(temp_dir):
    config = LogConfig(level="INFO", console_output=False, file_output=True, logs_dir=temp_dir)

    bound = setup_logging(config)
    bound.info("Launching client")
    logger.remove()

    assert "Launching client" in (temp_dir / "jvmlauncher.log").read_text()


def test_setup_is_repeatable(temp_dir):
    config = LogConfig(console_output=False, file_output=True, logs_dir=temp_dir)

    setup_logging(config)
    setup_logging(config).warning("once")
    logger.remove()

    assert (temp_dir / "jvmlauncher.log").read_text().count("once") == 1
