"""Fixed project layout the tasks operate on."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Tuple
import platform


class BuildMode(str, Enum):
    RELEASE = "release"
    DEBUG = "debug"

    @classmethod
    def from_flag(cls, debug: bool) -> "BuildMode":
        return cls.DEBUG if debug else cls.RELEASE


@dataclass(frozen=True, slots=True)
class HostPlatform:
    os_name: str

    @property
    def is_windows(self) -> bool:
        # platform.system() reports e.g. "CYGWIN_NT-10.0" under the POSIX layers
        return self.os_name.startswith(("windows", "cygwin", "msys", "mingw"))

    @classmethod
    def detect(cls) -> "HostPlatform":
        return cls(os_name=platform.system().lower())


@dataclass(frozen=True, slots=True)
class TaskConfig:
    """Names of the external tools and artifacts.

    Defaults describe the hyoga project: ``make`` at the repository root
    writes ``build/hyoga`` (``build/hyoga.exe`` on Windows) and ``odin fmt``
    formats ``src``.
    """

    program: str = "hyoga"
    build_dir: Path = Path("build")
    build_tool: str = "make"
    debug_target: str = "debug"
    windows_debug_suffix: str = "d"
    posix_debug_suffix: str = ".debug"
    format_command: Tuple[str, ...] = ("odin", "fmt", "src")

    def build_command(self, mode: BuildMode) -> list[str]:
        if mode is BuildMode.DEBUG:
            return [self.build_tool, self.debug_target]
        return [self.build_tool]

    def build_path(self, workspace: Path) -> Path:
        if self.build_dir.is_absolute():
            return self.build_dir
        return workspace / self.build_dir

    def executable_name(self, mode: BuildMode, host: HostPlatform) -> str:
        if host.is_windows:
            suffix = self.windows_debug_suffix if mode is BuildMode.DEBUG else ""
            return f"{self.program}{suffix}.exe"
        suffix = self.posix_debug_suffix if mode is BuildMode.DEBUG else ""
        return f"{self.program}{suffix}"

    def executable_path(self, workspace: Path, mode: BuildMode, host: HostPlatform) -> Path:
        return self.build_path(workspace) / self.executable_name(mode, host)


DEFAULT_CONFIG = TaskConfig()


__all__ = ["BuildMode", "DEFAULT_CONFIG", "HostPlatform", "TaskConfig"]
