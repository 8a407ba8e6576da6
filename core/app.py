"""Application entrypoint and Telegram handler registration."""

from __future__ import annotations

from telegram import Update
from telegram.ext import Application, CommandHandler, MessageHandler, filters

from config import load_config

from .bot import RustBot
from .logging_setup import configure_optional_json_logging, log


def main():
    """Start the RustBot Telegram bot."""
    config = load_config()
    configure_optional_json_logging()

    # Validate required config
    if not config.telegram_bot_token:
        log.error("TELEGRAM_BOT_TOKEN is required. Set it in .env")
        return

    log.info("🦀 RustBot starting...")
    log.info(f"   Playground: {config.playground_url}")
    log.info(
        f"   Toolchain: {config.playground_channel} / {config.playground_mode} / "
        f"edition {config.playground_edition}"
    )
    log.info(f"   Playground timeout: {config.playground_timeout_sec}s")
    log.info(f"   Max reply: {config.max_reply_chars} chars")
    log.info(f"   Reply cache: {config.reply_cache_size} messages")
    if config.telegram_allowed_users:
        log.info(f"   Allowed users: {', '.join(config.telegram_allowed_users)}")
    else:
        log.info("   Allowed users: everyone")

    bot = RustBot(config)

    async def _post_shutdown(application: Application):
        await bot.close()

    # Build Telegram application. Handlers may interleave while they wait on
    # the playground; nothing orders overlapping edits of one message.
    app = (
        Application.builder()
        .token(config.telegram_bot_token)
        .concurrent_updates(True)
        .post_shutdown(_post_shutdown)
        .build()
    )

    # Register handlers
    new_messages = filters.UpdateType.MESSAGE
    app.add_handler(CommandHandler("start", bot.cmd_help, filters=new_messages))
    app.add_handler(CommandHandler("help", bot.cmd_help, filters=new_messages))
    app.add_handler(
        MessageHandler(filters.TEXT & ~filters.COMMAND & new_messages, bot.handle_message)
    )
    app.add_handler(
        MessageHandler(filters.TEXT & filters.UpdateType.EDITED_MESSAGE, bot.handle_edited_message)
    )
    app.add_error_handler(bot.on_error)

    log.info("🦀 RustBot is running! Press Ctrl+C to stop.")

    # Start polling
    app.run_polling(
        drop_pending_updates=True,
        allowed_updates=[Update.MESSAGE, Update.EDITED_MESSAGE],
        timeout=30,
    )


if __name__ == "__main__":
    main()
