"""Tests for core/logging_setup.py - optional JSONL file logging."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

import core.logging_setup as logging_setup
from core.logging_setup import _infer_operation, configure_optional_json_logging, log


@pytest.fixture(autouse=True)
def _isolated_logging(monkeypatch: pytest.MonkeyPatch):
    """Keep INFO records flowing and drop any file handlers a test adds."""
    monkeypatch.delenv("JSON_LOG_ENABLED", raising=False)
    monkeypatch.delenv("JSON_LOG_PATH", raising=False)
    root = logging.getLogger()
    previous_level = root.level
    # pytest's own root handler turns the module-level basicConfig into a no-op.
    root.setLevel(logging.INFO)
    before = list(log.handlers)
    yield
    for handler in log.handlers[:]:
        if handler not in before:
            log.removeHandler(handler)
            handler.close()
    root.setLevel(previous_level)


def _file_handlers() -> list[logging.FileHandler]:
    return [h for h in log.handlers if isinstance(h, logging.FileHandler)]


def _read_lines(path: Path) -> list[dict]:
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines() if line.strip()]


# --- enablement ---


def test_disabled_by_default(tmp_path: Path) -> None:
    assert configure_optional_json_logging(tmp_path) is None
    assert _file_handlers() == []


def test_default_path_under_runtime_root(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("JSON_LOG_ENABLED", "1")
    path = configure_optional_json_logging(tmp_path)
    assert path == (tmp_path / "logs" / "rustbot.jsonl").resolve()
    assert path.exists()


def test_default_path_falls_back_to_project_root(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("JSON_LOG_ENABLED", "yes")
    monkeypatch.setattr(logging_setup, "PROJECT_ROOT", tmp_path)
    path = configure_optional_json_logging()
    assert path == (tmp_path / "logs" / "rustbot.jsonl").resolve()


def test_relative_log_path_resolves_against_runtime_root(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("JSON_LOG_ENABLED", "on")
    monkeypatch.setenv("JSON_LOG_PATH", "custom/bot.jsonl")
    path = configure_optional_json_logging(tmp_path)
    assert path == (tmp_path / "custom" / "bot.jsonl").resolve()


def test_second_call_does_not_add_handler(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("JSON_LOG_ENABLED", "1")
    first = configure_optional_json_logging(tmp_path)
    second = configure_optional_json_logging(tmp_path)
    assert first == second
    assert len(_file_handlers()) == 1


# --- record format ---


def test_records_carry_session_and_operation(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("JSON_LOG_ENABLED", "1")
    path = configure_optional_json_logging(tmp_path)

    log.info("[10] User edit: hi")
    logging.getLogger("rustbot.playground").info("Executing eval (42 chars) on stable/debug")

    lines = _read_lines(path)
    user_line = next(line for line in lines if line["message"] == "User edit: hi")
    assert user_line["session"] == "10"
    assert user_line["operation"] == "user_message"
    assert user_line["level"] == "INFO"
    assert user_line["logger"] == "rustbot"

    run_line = next(line for line in lines if line["logger"] == "rustbot.playground")
    assert run_line["session"] is None
    assert run_line["operation"] == "playground"


def test_exception_is_included(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("JSON_LOG_ENABLED", "1")
    path = configure_optional_json_logging(tmp_path)

    try:
        raise RuntimeError("kaboom")
    except RuntimeError:
        log.exception("[7] Unhandled Telegram error")

    line = next(line for line in _read_lines(path) if line["session"] == "7")
    assert "RuntimeError: kaboom" in line["exception"]


@pytest.mark.parametrize(
    ("text", "operation"),
    [
        ("User: ?eval", "user_message"),
        ("User edit: ?play", "user_message"),
        ("Bot: loading...", "bot_message"),
        ("Playground request failed: HTTP 502", "playground"),
        ("Executing play (12 chars) on stable/debug", "playground"),
        ("Structured JSON logging enabled", "general"),
        ("", "general"),
    ],
)
def test_infer_operation(text: str, operation: str) -> None:
    assert _infer_operation(text) == operation
