"""
RustBot — Configuration
Flat .env-based configuration system.
"""

import os
import re
from dataclasses import dataclass, field
from dotenv import load_dotenv

load_dotenv()


DEFAULT_PLAYGROUND_URL = "https://play.integer32.com/execute"


def _strip_inline_comment(value: str) -> str:
    """Strip shell-style inline comments for unquoted env values."""
    if not value:
        return ""
    cleaned = value.strip()
    if not cleaned:
        return ""
    if cleaned.startswith("#"):
        return ""
    return re.sub(r"\s+#.*$", "", cleaned).strip()


def _parse_allowed_users(raw: str) -> list[str]:
    """Parse TELEGRAM_ALLOWED_USERS as comma-separated numeric user IDs."""
    cleaned = _strip_inline_comment(raw)
    if not cleaned:
        return []

    users: list[str] = []
    for chunk in cleaned.split(","):
        token = chunk.strip()
        if not token:
            continue
        if token.startswith("#"):
            break
        token = token.split("#", 1)[0].strip()
        if not token:
            continue
        # Telegram user IDs are numeric; ignore placeholder/comment text safely.
        if token.lstrip("-").isdigit():
            users.append(token)
    return users


def _env(name: str, default: str) -> str:
    return _strip_inline_comment(os.getenv(name, default)) or default


@dataclass
class Config:
    # Telegram
    telegram_bot_token: str = ""
    telegram_allowed_users: list[str] = field(default_factory=list)

    # Rust playground
    playground_url: str = DEFAULT_PLAYGROUND_URL
    playground_channel: str = "stable"
    playground_mode: str = "debug"
    playground_edition: str = "2018"
    playground_timeout_sec: int = 30

    # Replies
    max_reply_chars: int = 500
    reply_cache_size: int = 1024


def load_config() -> Config:
    """Load config from environment variables."""
    allowed_raw = os.getenv("TELEGRAM_ALLOWED_USERS", "")
    allowed = _parse_allowed_users(allowed_raw)

    cfg = Config(
        telegram_bot_token=_strip_inline_comment(os.getenv("TELEGRAM_BOT_TOKEN", "")),
        telegram_allowed_users=allowed,
        playground_url=_env("PLAYGROUND_URL", DEFAULT_PLAYGROUND_URL),
        playground_channel=_env("PLAYGROUND_CHANNEL", "stable"),
        playground_mode=_env("PLAYGROUND_MODE", "debug"),
        playground_edition=_env("PLAYGROUND_EDITION", "2018"),
        playground_timeout_sec=int(_env("PLAYGROUND_TIMEOUT_SEC", "30")),
        max_reply_chars=int(_env("MAX_REPLY_CHARS", "500")),
        reply_cache_size=int(_env("REPLY_CACHE_SIZE", "1024")),
    )

    cfg.playground_channel = cfg.playground_channel.strip().lower()
    cfg.playground_mode = cfg.playground_mode.strip().lower()
    cfg.playground_timeout_sec = max(1, int(cfg.playground_timeout_sec))
    cfg.max_reply_chars = max(50, int(cfg.max_reply_chars))
    cfg.reply_cache_size = max(1, int(cfg.reply_cache_size))

    return cfg
