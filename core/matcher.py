"""Command recognition for `?eval` / `?play` fenced code blocks."""

from __future__ import annotations

import re

from .constants import CODE_LANGUAGE, HELP_KEYWORD
from .types import Command, CommandInvocation

# Keyword, whitespace, fence opener tagged with the language, then the shortest
# body that is followed by one or more newlines and the closing fence.
COMMAND_RE = re.compile(
    r"\?(eval|play)\s+```" + re.escape(CODE_LANGUAGE) + r"\n([\s\S]*?)\n+```"
)


def is_help(text: str | None) -> bool:
    return text == HELP_KEYWORD


def match_command(text: str | None) -> CommandInvocation | None:
    """Extract the first command block from message text.

    Returns None when the text holds no recognizable command. Only the first
    match is honored; later blocks in the same message are ignored.
    """
    if not text:
        return None

    m = COMMAND_RE.search(text)
    if not m:
        return None
    return CommandInvocation(command=Command(m.group(1)), code_body=m.group(2))
