"""Command line interface for the build/run/format tasks."""
from __future__ import annotations

from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Iterable, TextIO
import sys

from .build import Builder
from .command_runner import CommandResult, CommandRunner, SubprocessCommandRunner
from .config import DEFAULT_CONFIG, BuildMode, TaskConfig
from .errors import BuildError, BuildFailed, FormatError, TaskError, Terminated, ToolError
from .formatter import Formatter
from .run import Runner


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="task", description="Build, run and format the project")
    parser.add_argument("-v", "--verbose", action="store_true", help="Echo each external command before running it")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Build and run the program")
    run_parser.add_argument("-d", "--debug", action="store_true", help="Use the debug build")

    build_parser = subparsers.add_parser("build", help="Build the program")
    build_parser.add_argument("-d", "--debug", action="store_true", help="Use the debug build")

    subparsers.add_parser("format", help="Format the source directory")
    return parser


def _parse_arguments(argv: Iterable[str]) -> Namespace:
    return _build_parser().parse_args(list(argv))


def _emit(text: str, *, stream: TextIO | None = None) -> None:
    if not text:
        return
    print(text, end="" if text.endswith("\n") else "\n", file=stream or sys.stdout)


def _report_tool_failure(headline: str, error: ToolError) -> None:
    print(headline, file=sys.stderr)
    _emit(error.stdout)
    _emit(error.stderr, stream=sys.stderr)
    if error.returncode is None or not (error.stdout or error.stderr):
        print(f"Error: {error}", file=sys.stderr)


def _print_build_output(result: CommandResult) -> None:
    _emit(result.stdout)


def _print_launch(executable: Path) -> None:
    print(f"Running {executable}...", flush=True)


def main(argv: Iterable[str] | None = None, *, command_runner: CommandRunner | None = None) -> int:
    args = _parse_arguments(sys.argv[1:] if argv is None else argv)
    workspace = Path.cwd()
    runner = command_runner or SubprocessCommandRunner(verbose=args.verbose)

    try:
        if args.command == "run":
            return _handle_run(args, workspace, runner)
        if args.command == "build":
            return _handle_build(args, workspace, runner)
        if args.command == "format":
            return _handle_format(args, workspace, runner)
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        return 130
    raise ValueError(f"Unknown command: {args.command}")


def _handle_build(
    args: Namespace,
    workspace: Path,
    runner: CommandRunner,
    config: TaskConfig = DEFAULT_CONFIG,
) -> int:
    builder = Builder(command_runner=runner, workspace=workspace, config=config)
    try:
        result = builder.build(BuildMode.from_flag(args.debug))
    except BuildError as exc:
        _report_tool_failure("Build failed", exc)
        return 1
    _print_build_output(result)
    return 0


def _handle_run(
    args: Namespace,
    workspace: Path,
    runner: CommandRunner,
    config: TaskConfig = DEFAULT_CONFIG,
) -> int:
    task_runner = Runner(command_runner=runner, workspace=workspace, config=config)
    try:
        outcome = task_runner.run(
            BuildMode.from_flag(args.debug),
            on_built=_print_build_output,
            on_launch=_print_launch,
        )
    except BuildFailed as exc:
        _report_tool_failure("Build failed", exc.error)
        return 1
    except Terminated as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 128 + exc.signal
    except TaskError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Process exited with code {outcome.exit_code}")
    return outcome.exit_code


def _handle_format(
    args: Namespace,
    workspace: Path,
    runner: CommandRunner,
    config: TaskConfig = DEFAULT_CONFIG,
) -> int:
    formatter = Formatter(command_runner=runner, workspace=workspace, config=config)
    try:
        formatter.format()
    except FormatError as exc:
        _report_tool_failure("Format failed", exc)
        return 1
    return 0


__all__ = ["main"]
