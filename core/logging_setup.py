"""Logging configuration for RustBot."""

from __future__ import annotations

import json
import logging
import os
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .constants import PROJECT_ROOT

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("rustbot")

# Reduce noisy transport logs by default (can be re-enabled with RUSTBOT_VERBOSE_HTTP=1).
if os.getenv("RUSTBOT_VERBOSE_HTTP", "").strip().lower() not in {"1", "true", "yes"}:
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


_SESSION_RE = re.compile(r"^\[(?P<session>[^\]]+)\]\s*(?P<body>.*)$", re.DOTALL)


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name, "")
    if not raw:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _infer_operation(text: str) -> str:
    lower = (text or "").lower()
    if lower.startswith("user:") or lower.startswith("user edit:"):
        return "user_message"
    if lower.startswith("bot:"):
        return "bot_message"
    if "playground" in lower or lower.startswith("executing"):
        return "playground"
    return "general"


class _JsonLogFormatter(logging.Formatter):
    """Structured one-line JSON formatter."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        session_id: str | None = None
        body = message

        matched = _SESSION_RE.match(message or "")
        if matched:
            session_id = matched.group("session")
            body = matched.group("body")

        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": body,
            "session": session_id,
            "operation": _infer_operation(body),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False)


def configure_optional_json_logging(runtime_root: str | Path | None = None) -> Path | None:
    """Enable optional JSONL file logging while keeping human logs on stdout.

    Controlled by env:
    - JSON_LOG_ENABLED=1|true|yes|on
    - JSON_LOG_PATH=<optional path, defaults to <runtime_root>/logs/rustbot.jsonl>
    """
    if not _env_flag("JSON_LOG_ENABLED", default=False):
        return None

    runtime_base = Path(runtime_root).expanduser().resolve() if runtime_root else PROJECT_ROOT
    raw_path = os.getenv("JSON_LOG_PATH", "").strip()
    if raw_path:
        path = Path(raw_path).expanduser()
        if not path.is_absolute():
            path = (runtime_base / path).resolve()
    else:
        path = (runtime_base / "logs" / "rustbot.jsonl").resolve()

    logger = logging.getLogger("rustbot")
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename).resolve() == path:
            return path

    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(_JsonLogFormatter())
    logger.addHandler(file_handler)
    logger.info(f"Structured JSON logging enabled: {path.as_posix()}")
    return path
