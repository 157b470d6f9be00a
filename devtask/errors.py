"""Exceptions raised by the build, run and format tasks."""
from __future__ import annotations

from pathlib import Path
from typing import Sequence
import signal as signal_module

from .command_runner import CommandResult, format_command


class TaskError(RuntimeError):
    """Base class for every failure reported to the operator."""


class ToolError(TaskError):
    """An external tool exited non-zero or could not be started."""

    tool_label = "Command"

    def __init__(
        self,
        command: Sequence[str],
        returncode: int | None,
        *,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        if returncode is None:
            message = f"{self.tool_label} could not be started: {format_command(command)}"
        else:
            message = f"{self.tool_label} failed with exit code {returncode}: {format_command(command)}"
        super().__init__(message)
        self.command = list(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr

    @classmethod
    def from_result(cls, result: CommandResult) -> "ToolError":
        return cls(result.command, result.returncode, stdout=result.stdout, stderr=result.stderr)

    @classmethod
    def from_spawn_error(cls, command: Sequence[str], exc: OSError) -> "ToolError":
        return cls(command, None, stderr=str(exc))


class BuildError(ToolError):
    tool_label = "Build"


class FormatError(ToolError):
    tool_label = "Formatter"


class RunError(TaskError):
    pass


class BuildFailed(RunError):
    def __init__(self, error: BuildError) -> None:
        super().__init__(str(error))
        self.error = error


class ExecutableNotFound(RunError):
    """The build reported success but the expected artifact is missing."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Executable not found: {path} (check the build mode and output directory)")
        self.path = path


class SpawnFailed(RunError):
    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Failed to start {path}: {cause}")
        self.path = path
        self.cause = cause


class Terminated(RunError):
    """The launched program was killed by a signal instead of exiting."""

    def __init__(self, signal: int, path: Path) -> None:
        super().__init__(f"{path} terminated by signal {_signal_name(signal)}")
        self.signal = signal
        self.path = path


def _signal_name(number: int) -> str:
    try:
        return f"{signal_module.Signals(number).name} ({number})"
    except ValueError:
        return str(number)


__all__ = [
    "BuildError",
    "BuildFailed",
    "ExecutableNotFound",
    "FormatError",
    "RunError",
    "SpawnFailed",
    "TaskError",
    "Terminated",
    "ToolError",
]
