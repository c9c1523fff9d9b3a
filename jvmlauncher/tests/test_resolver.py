"""Tests for runtime resolution"""

import pytest

from jvmlauncher.exceptions import ExecutableNotFoundError, RuntimeHomeMissingError
from jvmlauncher.resolver import (
    detect_major_version,
    parse_major_version,
    read_runtime_version,
    resolve_java_executable,
)


class TestResolveJavaExecutable:

    def test_generic_executable(self, java_home):
        java = resolve_java_executable(java_home)

        assert java == (java_home / "bin" / "java").absolute()
        assert java.is_absolute()

    def test_windows_executable_checked_first(self, java_home):
        (java_home / "bin" / "java.exe").write_text("MZ")

        assert resolve_java_executable(java_home).name == "java.exe"

    def test_accepts_string_path(self, java_home):
        assert resolve_java_executable(str(java_home)) == resolve_java_executable(java_home)

    def test_idempotent(self, java_home):
        assert resolve_java_executable(java_home) == resolve_java_executable(java_home)

    def test_missing_home(self, temp_dir):
        with pytest.raises(RuntimeHomeMissingError, match="does not exist"):
            resolve_java_executable(temp_dir / "no-jre")

    @pytest.mark.parametrize("home", [None, ""])
    def test_unset_home(self, home):
        with pytest.raises(RuntimeHomeMissingError):
            resolve_java_executable(home)

    def test_missing_executable_names_bin_dir(self, temp_dir):
        home = temp_dir / "jre"
        (home / "bin").mkdir(parents=True)

        with pytest.raises(ExecutableNotFoundError) as exc_info:
            resolve_java_executable(home)

        assert exc_info.value.directory == home / "bin"
        assert str(home / "bin") in str(exc_info.value)


class TestRuntimeVersion:

    @pytest.mark.parametrize("version,major", [
        ("17.0.2", 17),
        ("21", 21),
        ("21-ea", 21),
        ("11.0.19+7", 11),
        ("1.8.0_292", 8),
        ("9", 9),
    ])
    def test_parse_major_version(self, version, major):
        assert parse_major_version(version) == major

    @pytest.mark.parametrize("version", [None, "", "unknown"])
    def test_parse_unknown_version(self, version):
        assert parse_major_version(version) is None

    def test_read_release_file(self, java_home):
        assert read_runtime_version(java_home) == "17.0.2"

    def test_missing_release_file(self, temp_dir):
        assert read_runtime_version(temp_dir) is None

    def test_release_file_without_version(self, temp_dir):
        (temp_dir / "release").write_text('IMPLEMENTOR="Someone"\n')

        assert detect_major_version(temp_dir) is None

    def test_detect_major_version(self, java_home):
        (java_home / "release").write_text('JAVA_VERSION="1.8.0_292"\n')

        assert detect_major_version(java_home) == 8
