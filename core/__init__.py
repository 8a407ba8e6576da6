"""RustBot core package."""

from .app import main
from .bot import RustBot
from .constants import HELP_TEXT, LOADING_TEXT, TOO_LONG_TEXT
from .correlator import ReplyCorrelator
from .logging_setup import log
from .markdown import display_to_telegram_html, restore_code_fences
from .matcher import is_help, match_command
from .playground import PlaygroundClient, PlaygroundError, build_source, render_result
from .types import Command, CommandInvocation, ExecutionResult

__all__ = [
    "build_source",
    "Command",
    "CommandInvocation",
    "display_to_telegram_html",
    "ExecutionResult",
    "HELP_TEXT",
    "is_help",
    "LOADING_TEXT",
    "log",
    "main",
    "match_command",
    "PlaygroundClient",
    "PlaygroundError",
    "render_result",
    "ReplyCorrelator",
    "restore_code_fences",
    "RustBot",
    "TOO_LONG_TEXT",
]
