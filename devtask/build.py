"""Invoke the external build tool for a given build mode."""
from __future__ import annotations

from pathlib import Path

from .command_runner import CommandResult, CommandRunner
from .config import DEFAULT_CONFIG, BuildMode, TaskConfig
from .errors import BuildError


class Builder:
    """Runs ``make`` (or the configured tool) in the workspace.

    The build tool's output is captured rather than streamed; callers decide
    what to show. A single failed attempt raises :class:`BuildError`.
    """

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

    @property
    def config(self) -> TaskConfig:
        return self._config

    @property
    def workspace(self) -> Path:
        return self._workspace

    def command(self, mode: BuildMode) -> list[str]:
        return self._config.build_command(mode)

    def build(self, mode: BuildMode) -> CommandResult:
        command = self.command(mode)
        self._config.build_path(self._workspace).mkdir(parents=True, exist_ok=True)
        try:
            result = self._command_runner.run(
                command,
                cwd=self._workspace,
                note=f"build ({mode.value})",
            )
        except OSError as exc:
            raise BuildError.from_spawn_error(command, exc) from exc
        if not result.succeeded:
            raise BuildError.from_result(result)
        return result


__all__ = ["Builder"]
