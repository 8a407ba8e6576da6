"""Telegram message sending/editing and framework error handling."""

from __future__ import annotations

from telegram import Message, Update
from telegram.constants import ParseMode
from telegram.error import BadRequest, Conflict, NetworkError, RetryAfter, TimedOut
from telegram.ext import ContextTypes

from ..logging_setup import log
from ..markdown import display_to_telegram_html


class BotMessagingMixin:
    async def _try_send(self, send_fn, text: str, edit: bool = False):
        """Send/edit with HTML, fall back to plain text.

        Returns whatever ``send_fn`` returned, or None if both attempts failed.
        An edit that leaves the message unchanged returns True.
        """
        try:
            return await send_fn(display_to_telegram_html(text), parse_mode=ParseMode.HTML)
        except BadRequest as e:
            if edit and "not modified" in str(e).lower():
                return True
            log.debug(f"HTML send rejected, retrying as plain text: {e}")
        except Exception as e:
            log.debug(f"HTML send failed, retrying as plain text: {e}")

        # Fallback: send the raw display text without markup
        try:
            return await send_fn(text)
        except Exception as e:
            log.error(f"Failed to send message: {e}")
            return None

    async def _post_reply(self, message: Message, text: str) -> Message | None:
        session_id = str(message.chat_id)
        self._log_bot_message(session_id, text)
        return await self._try_send(message.reply_text, text)

    async def _edit_reply(self, reply: Message, text: str) -> bool:
        session_id = str(reply.chat_id)
        self._log_bot_message(session_id, text)
        return await self._try_send(reply.edit_text, text, edit=True) is not None

    # ── Global Telegram Error Handler ────────────────────────

    async def on_error(self, update: object, context: ContextTypes.DEFAULT_TYPE):
        """Handle Telegram framework errors without noisy unstructured tracebacks."""
        err = context.error
        session_id = "unknown"
        if isinstance(update, Update):
            session_id = self._session_id_from_update(update)

        if isinstance(err, Conflict):
            log.warning(
                f"[{session_id}] Telegram polling conflict: another bot instance is using getUpdates. "
                "Keep only one RustBot process active for this bot token."
            )
            return
        if isinstance(err, RetryAfter):
            log.warning(f"[{session_id}] Telegram rate limit: retry after {err.retry_after}s")
            return
        if isinstance(err, (TimedOut, NetworkError)):
            log.warning(f"[{session_id}] Telegram network issue: {err}")
            return

        log.exception(f"[{session_id}] Unhandled Telegram error", exc_info=err)

    async def close(self):
        await self.playground.aclose()
