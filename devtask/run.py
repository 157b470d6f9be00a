"""Build the project, then launch the produced executable."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from .build import Builder
from .command_runner import CommandResult, CommandRunner
from .config import DEFAULT_CONFIG, BuildMode, HostPlatform, TaskConfig
from .errors import BuildError, BuildFailed, ExecutableNotFound, SpawnFailed, Terminated


BuiltCallback = Callable[[CommandResult], None]
LaunchCallback = Callable[[Path], None]


@dataclass(slots=True)
class RunOutcome:
    mode: BuildMode
    executable: Path
    build: CommandResult
    exit_code: int


class Runner:
    """Builds first and only launches the executable after a successful build.

    The executable runs with the build output directory as its working
    directory and inherits the terminal, so its output appears live.
    """

    def __init__(
        self,
        *,
        command_runner: CommandRunner,
        workspace: Path,
        config: TaskConfig = DEFAULT_CONFIG,
        builder: Builder | None = None,
        host: HostPlatform | None = None,
    ) -> None:
        self._command_runner = command_runner
        self._workspace = workspace
        self._config = config
        self._builder = builder or Builder(command_runner=command_runner, workspace=workspace, config=config)
        self._host = host or HostPlatform.detect()

    def executable_path(self, mode: BuildMode) -> Path:
        return self._config.executable_path(self._workspace, mode, self._host).resolve()

    def run(
        self,
        mode: BuildMode,
        *,
        on_built: BuiltCallback | None = None,
        on_launch: LaunchCallback | None = None,
    ) -> RunOutcome:
        try:
            build_result = self._builder.build(mode)
        except BuildError as exc:
            raise BuildFailed(exc) from exc

        if on_built is not None:
            on_built(build_result)

        executable = self.executable_path(mode)
        if not executable.exists():
            raise ExecutableNotFound(executable)
        if on_launch is not None:
            on_launch(executable)

        try:
            result = self._command_runner.run(
                [str(executable)],
                cwd=self._config.build_path(self._workspace),
                note=f"run ({mode.value})",
                stream=True,
            )
        except OSError as exc:
            raise SpawnFailed(executable, exc) from exc

        if result.returncode < 0:
            raise Terminated(-result.returncode, executable)

        return RunOutcome(mode=mode, executable=executable, build=build_result, exit_code=result.returncode)


__all__ = ["BuiltCallback", "LaunchCallback", "RunOutcome", "Runner"]
