"""Build, run and format helpers for a make-driven native project."""
from __future__ import annotations

from .build import Builder
from .config import BuildMode, HostPlatform, TaskConfig
from .formatter import Formatter
from .run import RunOutcome, Runner

__all__ = ["BuildMode", "Builder", "Formatter", "HostPlatform", "RunOutcome", "Runner", "TaskConfig"]
