"""Utilities for executing external commands, captured or streamed."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Sequence, TextIO, TypeVar
import shlex
import subprocess
import sys


T = TypeVar("T")


@dataclass
class CommandResult:
    """Represents the outcome of an executed command."""

    command: Sequence[str]
    returncode: int
    stdout: str
    stderr: str
    streamed: bool = False

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


def format_command(command: Sequence[str]) -> str:
    return " ".join(shlex.quote(str(part)) for part in command)


def wait_through_interrupt(wait: Callable[[], T]) -> T:
    """Call ``wait`` until it returns, then re-raise any Ctrl-C seen meanwhile.

    The child shares our process group, so it receives the same SIGINT and
    decides on its own how to shut down; it is never killed from here.
    """

    interrupted = False
    while True:
        try:
            value = wait()
            break
        except KeyboardInterrupt:
            interrupted = True
    if interrupted:
        raise KeyboardInterrupt
    return value


class CommandRunner:
    """Abstract command runner interface."""

    def run(
        self,
        command: Sequence[str],
        *,
        cwd: Path | None = None,
        note: str | None = None,
        stream: bool = False,
    ) -> CommandResult:
        raise NotImplementedError

    def format_command(self, command: Sequence[str]) -> str:
        return format_command(command)


class SubprocessCommandRunner(CommandRunner):
    """Command runner that executes commands via :mod:`subprocess`.

    Spawn failures (missing executable, permission denied) propagate as
    :class:`OSError` so callers can tell them apart from a non-zero exit.
    """

    def __init__(self, *, verbose: bool = False, echo: TextIO | None = None) -> None:
        self._verbose = verbose
        self._echo = echo

    def _announce(self, command: Sequence[str], *, cwd: Path | None, note: str | None) -> None:
        if not self._verbose:
            return
        parts: List[str] = ["[exec]"]
        if note:
            parts.append(note)
        if cwd:
            parts.append(f"(cwd={cwd})")
        parts.append(self.format_command(command))
        print(" ".join(parts), file=self._echo or sys.stderr, flush=True)

    def run(
        self,
        command: Sequence[str],
        *,
        cwd: Path | None = None,
        note: str | None = None,
        stream: bool = False,
    ) -> CommandResult:
        self._announce(command, cwd=cwd, note=note)
        if not stream:
            with subprocess.Popen(
                list(command),
                cwd=str(cwd) if cwd else None,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
            ) as process:
                stdout, stderr = wait_through_interrupt(process.communicate)
            return CommandResult(
                command=command,
                returncode=process.returncode,
                stdout=stdout,
                stderr=stderr,
            )

        # Inherited stdio: the child writes straight to our terminal.
        with subprocess.Popen(list(command), cwd=str(cwd) if cwd else None) as process:
            returncode = wait_through_interrupt(process.wait)
        return CommandResult(
            command=command,
            returncode=returncode,
            stdout="",
            stderr="",
            streamed=True,
        )


__all__ = [
    "CommandResult",
    "CommandRunner",
    "SubprocessCommandRunner",
    "format_command",
    "wait_through_interrupt",
]
