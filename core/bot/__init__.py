"""Composed RustBot bot class built from focused mixins."""

from __future__ import annotations

from .base import BotBaseMixin
from .commands import BotCommandsMixin
from .handlers import BotHandlersMixin
from .messaging import BotMessagingMixin


class RustBot(
    BotMessagingMixin,
    BotHandlersMixin,
    BotCommandsMixin,
    BotBaseMixin,
):
    """The main bot class wiring Telegram, the playground, and reply tracking together."""

    pass


__all__ = ["RustBot"]
