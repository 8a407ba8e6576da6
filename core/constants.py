"""Shared constants used by the RustBot bot."""

from __future__ import annotations

from pathlib import Path

# Project root for resolving runtime-relative paths reliably.
PROJECT_ROOT = Path(__file__).resolve().parent.parent

HELP_KEYWORD = "?help"

LOADING_TEXT = "loading..."

TOO_LONG_TEXT = "response too long, manually evaluate!"

PLAYGROUND_FAILURE_TEXT = "⚠️ playground request failed: {reason}"

# Language tag a fenced block must carry to be executed.
CODE_LANGUAGE = "rust"

# `eval` submits a bare expression; this turns it into a program that
# Debug-prints the value.
EVAL_TEMPLATE = 'fn main() {{ println!("{{:?}}", {{ {body} }}) }}'

HELP_TEXT = """```RustBot v0.1.0

USAGE:
    ?help | ?eval | ?play { rust codeblock }

COMMANDS:
    ?help - display this help command
    ?eval - evaluate the code and Debug the result
    ?play - execute code and send stdout/stderr (equivalent to local run)
```"""
