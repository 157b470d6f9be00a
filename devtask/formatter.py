"""Run the source formatter over the project's source directory."""
from __future__ import annotations

from pathlib import Path

from .command_runner import CommandResult, CommandRunner
from .config import DEFAULT_CONFIG, TaskConfig
from .errors import FormatError


class Formatter:
    def __init__(
        self,
        *,
        command_runner: CommandRunner,
        workspace: Path,
        config: TaskConfig = DEFAULT_CONFIG,
    ) -> None:
        self._command_runner = command_runner
        self._workspace = workspace
        self._config = config

    def format(self) -> CommandResult:
        command = list(self._config.format_command)
        try:
            result = self._command_runner.run(
                command,
                cwd=self._workspace,
                note="format",
                stream=True,
            )
        except OSError as exc:
            raise FormatError.from_spawn_error(command, exc) from exc
        if not result.succeeded:
            raise FormatError.from_result(result)
        return result


__all__ = ["Formatter"]
