"""Help command handlers for ?help, /help and /start."""

from __future__ import annotations

from telegram import Update
from telegram.ext import ContextTypes

from ..constants import HELP_TEXT


class BotCommandsMixin:
    async def cmd_help(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Post the static usage text. Nothing is recorded for edits."""
        if not update.effective_user or not update.message:
            return
        if not self.is_allowed(update.effective_user.id):
            return

        session_id = self._session_id_from_update(update)
        self._log_user_message(session_id, update.message.text or "?help")
        await self._post_reply(update.message, HELP_TEXT)
