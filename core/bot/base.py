"""Core bot base state and shared utility methods."""

from __future__ import annotations

from telegram import Message, Update

from config import Config

from ..correlator import ReplyCorrelator
from ..logging_setup import log
from ..markdown import restore_code_fences
from ..playground import PlaygroundClient


class BotBaseMixin:
    def __init__(
        self,
        config: Config,
        playground: PlaygroundClient | None = None,
        replies: ReplyCorrelator | None = None,
    ):
        self.config = config
        self.playground = playground or PlaygroundClient.from_config(config)
        # Original message -> bot reply, for edit-triggered re-runs.
        self.replies = replies if replies is not None else ReplyCorrelator(config.reply_cache_size)

    def is_allowed(self, user_id: int) -> bool:
        """Check if this user is in the allowlist (empty = allow all)."""
        if not self.config.telegram_allowed_users:
            return True
        return str(user_id) in self.config.telegram_allowed_users

    @staticmethod
    def _session_id_from_update(update: Update | None) -> str:
        if update and update.effective_chat:
            return str(update.effective_chat.id)
        return "unknown"

    @staticmethod
    def _reply_key(message: Message) -> str:
        """Message ids are only unique per chat, so key on both."""
        return f"{message.chat_id}:{message.message_id}"

    @staticmethod
    def _message_source(message: Message) -> str:
        return restore_code_fences(message.text, message.entities)

    @staticmethod
    def _trim_for_log(text: str, max_chars: int = 2000) -> str:
        if len(text) <= max_chars:
            return text
        return text[:max_chars] + "\n...[truncated]"

    def _log_user_message(self, session_id: str, text: str, edited: bool = False):
        label = "User edit" if edited else "User"
        log.info(f"[{session_id}] {label}: {self._trim_for_log(text)}")

    def _log_bot_message(self, session_id: str, text: str):
        log.info(f"[{session_id}] Bot: {self._trim_for_log(text)}")
