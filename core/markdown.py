"""Conversion between Telegram message markup and fenced code blocks."""

from __future__ import annotations

import re
from typing import Sequence

from telegram import MessageEntity

_FENCED_RE = re.compile(r"```([\s\S]*)```")


def _escape_html(text: str) -> str:
    """Escape HTML special characters."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def restore_code_fences(text: str | None, entities: Sequence[MessageEntity] | None) -> str:
    """Put back the ``` fences Telegram clients turn into `pre` entities.

    A user typing ```rust ... ``` receives a message whose text has the
    backticks stripped and a `pre` entity (language "rust") over the body.
    Entity offsets are in UTF-16 code units.
    """
    if not text:
        return ""
    pre_entities = sorted(
        (e for e in entities or () if e.type == MessageEntity.PRE),
        key=lambda e: e.offset,
    )
    if not pre_entities:
        return text

    encoded = text.encode("utf-16-le")
    parts: list[str] = []
    cursor = 0
    for entity in pre_entities:
        start = entity.offset * 2
        end = (entity.offset + entity.length) * 2
        if start < cursor:
            # Overlapping entity; keep the first one.
            continue
        parts.append(encoded[cursor:start].decode("utf-16-le"))
        body = encoded[start:end].decode("utf-16-le")
        parts.append(f"```{entity.language or ''}\n{body}\n```")
        cursor = end
    parts.append(encoded[cursor:].decode("utf-16-le"))
    return "".join(parts)


def display_to_telegram_html(text: str) -> str:
    """Render bot display text as Telegram HTML.

    Text wrapped in a single ``` fence becomes a <pre> block; anything else is
    escaped as-is.
    """
    if not text:
        return ""

    m = _FENCED_RE.fullmatch(text)
    if not m:
        return _escape_html(text)

    body = m.group(1)
    if not body.strip():
        return "<i>(no output)</i>"
    return f"<pre>{_escape_html(body)}</pre>"
