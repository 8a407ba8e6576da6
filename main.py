#!/usr/bin/env python3
"""
RustBot — Rust playground relay for Telegram
============================================
Send `?eval` or `?play` followed by a ```rust code block and the bot runs it
on the Rust playground, then edits its reply with the output. Editing the
original message re-runs it in place.

Architecture: Telegram Polling → handle_message → match_command → Playground → Edit reply
"""

from core.app import main

if __name__ == "__main__":
    main()
