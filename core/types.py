"""Shared datatypes for RustBot."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Command(str, Enum):
    EVAL = "eval"
    PLAY = "play"


@dataclass(frozen=True)
class CommandInvocation:
    command: Command
    code_body: str


@dataclass(frozen=True)
class ExecutionResult:
    success: bool
    stdout: str = ""
    stderr: str = ""
