"""Tests for core/markdown.py - Telegram markup conversion."""

from __future__ import annotations

from telegram import MessageEntity

from core.constants import HELP_TEXT
from core.markdown import display_to_telegram_html, restore_code_fences
from core.matcher import match_command


def _pre(offset: int, length: int, language: str | None = "rust") -> MessageEntity:
    return MessageEntity(type=MessageEntity.PRE, offset=offset, length=length, language=language)


def test_text_without_entities_is_unchanged() -> None:
    assert restore_code_fences("?eval ```rust\n1\n```", None) == "?eval ```rust\n1\n```"
    assert restore_code_fences(None, None) == ""


def test_non_pre_entities_are_ignored() -> None:
    bold = MessageEntity(type=MessageEntity.BOLD, offset=0, length=5)
    assert restore_code_fences("?eval hi", [bold]) == "?eval hi"


def test_pre_entity_becomes_fenced_block() -> None:
    text = "?eval 1+1"
    restored = restore_code_fences(text, [_pre(6, 3)])
    assert restored == "?eval ```rust\n1+1\n```"

    invocation = match_command(restored)
    assert invocation is not None
    assert invocation.code_body == "1+1"


def test_offsets_are_utf16() -> None:
    # The crab emoji takes two UTF-16 code units.
    text = "🦀 ?play fn main() {}"
    restored = restore_code_fences(text, [_pre(9, 12)])
    assert restored == "🦀 ?play ```rust\nfn main() {}\n```"


def test_multiple_pre_entities() -> None:
    text = "?eval a\nand b"
    restored = restore_code_fences(text, [_pre(12, 1, None), _pre(6, 1)])
    assert restored == "?eval ```rust\na\n```\nand ```\nb\n```"


def test_display_fenced_output_becomes_pre() -> None:
    assert display_to_telegram_html("```Some(<T>) & 1```") == "<pre>Some(&lt;T&gt;) &amp; 1</pre>"


def test_display_plain_text_is_escaped() -> None:
    assert display_to_telegram_html("loading...") == "loading..."
    assert display_to_telegram_html("a < b") == "a &lt; b"


def test_display_empty_output() -> None:
    assert display_to_telegram_html("``````") == "<i>(no output)</i>"
    assert display_to_telegram_html("") == ""


def test_help_text_renders_as_pre() -> None:
    html = display_to_telegram_html(HELP_TEXT)
    assert html.startswith("<pre>RustBot v0.1.0")
    assert html.endswith("</pre>")
