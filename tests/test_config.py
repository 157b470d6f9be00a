from __future__ import annotations

from pathlib import Path
import unittest
from unittest.mock import patch

from devtask.config import DEFAULT_CONFIG, BuildMode, HostPlatform, TaskConfig


WINDOWS = HostPlatform(os_name="windows")
LINUX = HostPlatform(os_name="linux")
DARWIN = HostPlatform(os_name="darwin")


class BuildModeTests(unittest.TestCase):
    def test_from_flag(self) -> None:
        self.assertIs(BuildMode.from_flag(True), BuildMode.DEBUG)
        self.assertIs(BuildMode.from_flag(False), BuildMode.RELEASE)

    def test_build_command_per_mode(self) -> None:
        self.assertEqual(DEFAULT_CONFIG.build_command(BuildMode.RELEASE), ["make"])
        self.assertEqual(DEFAULT_CONFIG.build_command(BuildMode.DEBUG), ["make", "debug"])


class HostPlatformTests(unittest.TestCase):
    def test_windows_family(self) -> None:
        for name in ("windows", "cygwin_nt-10.0", "msys_nt-10.0", "mingw64_nt-10.0"):
            with self.subTest(name=name):
                self.assertTrue(HostPlatform(os_name=name).is_windows)

    def test_posix_hosts(self) -> None:
        self.assertFalse(LINUX.is_windows)
        self.assertFalse(DARWIN.is_windows)

    def test_detect_lowercases_system_name(self) -> None:
        with patch("devtask.config.platform.system", return_value="Windows"):
            self.assertTrue(HostPlatform.detect().is_windows)
        with patch("devtask.config.platform.system", return_value="Linux"):
            self.assertEqual(HostPlatform.detect().os_name, "linux")


class ExecutablePathTests(unittest.TestCase):
    def setUp(self) -> None:
        self.workspace = Path("/work/hyoga")

    def test_windows_names(self) -> None:
        self.assertEqual(
            DEFAULT_CONFIG.executable_path(self.workspace, BuildMode.DEBUG, WINDOWS),
            self.workspace / "build" / "hyogad.exe",
        )
        self.assertEqual(
            DEFAULT_CONFIG.executable_path(self.workspace, BuildMode.RELEASE, WINDOWS),
            self.workspace / "build" / "hyoga.exe",
        )

    def test_posix_names_never_have_exe_suffix(self) -> None:
        for host in (LINUX, DARWIN):
            for mode in BuildMode:
                with self.subTest(host=host.os_name, mode=mode):
                    name = DEFAULT_CONFIG.executable_name(mode, host)
                    self.assertFalse(name.endswith(".exe"))
        self.assertEqual(DEFAULT_CONFIG.executable_name(BuildMode.RELEASE, LINUX), "hyoga")
        self.assertEqual(DEFAULT_CONFIG.executable_name(BuildMode.DEBUG, LINUX), "hyoga.debug")

    def test_path_is_deterministic(self) -> None:
        first = DEFAULT_CONFIG.executable_path(self.workspace, BuildMode.DEBUG, LINUX)
        second = DEFAULT_CONFIG.executable_path(self.workspace, BuildMode.DEBUG, LINUX)
        self.assertEqual(first, second)

    def test_absolute_build_dir_is_kept(self) -> None:
        config = TaskConfig(program="demo", build_dir=Path("/tmp/out"))
        self.assertEqual(config.build_path(self.workspace), Path("/tmp/out"))
        self.assertEqual(config.executable_path(self.workspace, BuildMode.RELEASE, LINUX), Path("/tmp/out/demo"))


if __name__ == "__main__":
    unittest.main()
