"""Bounded map from an original chat message to the bot's reply."""

from __future__ import annotations

from collections import OrderedDict
from typing import Any


class ReplyCorrelator:
    """LRU table of ``message id -> reply handle``.

    Lets an edited message find the reply it produced earlier. Only touched
    from the event loop, so there is no locking.
    """

    def __init__(self, capacity: int = 1024):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._entries: OrderedDict[str, Any] = OrderedDict()

    def record(self, message_id: str, handle: Any) -> None:
        self._entries[message_id] = handle
        self._entries.move_to_end(message_id)
        while len(self._entries) > self.capacity:
            self._entries.popitem(last=False)

    def lookup(self, message_id: str) -> Any | None:
        handle = self._entries.get(message_id)
        if handle is not None:
            self._entries.move_to_end(message_id)
        return handle

    def __contains__(self, message_id: object) -> bool:
        return message_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)
