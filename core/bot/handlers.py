"""Telegram text handlers: new messages and edits of earlier messages."""

from __future__ import annotations

from telegram import Message, Update
from telegram.ext import ContextTypes

from ..constants import LOADING_TEXT, PLAYGROUND_FAILURE_TEXT
from ..logging_setup import log
from ..matcher import is_help, match_command
from ..playground import PlaygroundError
from ..types import CommandInvocation


class BotHandlersMixin:
    # ── New Message Handler ───────────────────────────────────

    async def handle_message(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle new text messages.

        1. Exactly `?help` posts the usage text (nothing recorded)
        2. No `?eval` / `?play` block: ignore
        3. Otherwise post "loading...", run it, edit in the result, and
           remember the reply for later edits
        """
        if not update.effective_user or not update.message or not update.message.text:
            return
        if not self.is_allowed(update.effective_user.id):
            return

        message = update.message
        if is_help(message.text):
            await self.cmd_help(update, context)
            return

        invocation = match_command(self._message_source(message))
        if invocation is None:
            return

        session_id = self._session_id_from_update(update)
        self._log_user_message(session_id, message.text)

        reply = await self._post_reply(message, LOADING_TEXT)
        if reply is None:
            log.warning(f"[{session_id}] Could not post placeholder; dropping {invocation.command.value}")
            return

        await self._run_into_reply(session_id, reply, invocation)
        self.replies.record(self._reply_key(message), reply)

    # ── Edited Message Handler ────────────────────────────────

    async def handle_edited_message(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Re-run a command when the user edits a message the bot answered.

        Edits of unknown messages, or edits that no longer hold a command, are
        ignored and any earlier reply is left as it was.
        """
        message = update.edited_message
        if not update.effective_user or not message or not message.text:
            return
        if not self.is_allowed(update.effective_user.id):
            return

        reply = self.replies.lookup(self._reply_key(message))
        if reply is None:
            return

        invocation = match_command(self._message_source(message))
        if invocation is None:
            return

        session_id = self._session_id_from_update(update)
        self._log_user_message(session_id, message.text, edited=True)

        await self._edit_reply(reply, LOADING_TEXT)
        await self._run_into_reply(session_id, reply, invocation)

    # ── Shared Pipeline ───────────────────────────────────────

    async def _run_into_reply(self, session_id: str, reply: Message, invocation: CommandInvocation):
        """Evaluate on the playground and edit the outcome into ``reply``."""
        try:
            output = await self.playground.evaluate(invocation)
        except PlaygroundError as e:
            log.error(f"[{session_id}] Playground request failed: {e}")
            output = PLAYGROUND_FAILURE_TEXT.format(reason=e)

        await self._edit_reply(reply, output)
