"""Bounded, most-recent-first history of generated passwords."""

from __future__ import annotations

import threading
from collections import deque
from typing import List, Optional

from keyforge.config import Config


class HistoryBuffer:
    """In-memory ring of recent passwords; nothing is ever written to disk."""

    def __init__(self, capacity: Optional[int] = None):
        if capacity is None:
            capacity = Config.HISTORY_SIZE
        if capacity < 1:
            raise ValueError("History capacity must be at least 1")
        self.capacity = capacity
        # appendleft + maxlen evicts from the right (oldest) end
        self._items: deque = deque(maxlen=capacity)
        self._lock = threading.Lock()

    def record(self, password: str) -> None:
        if not password:
            return
        with self._lock:
            self._items.appendleft(password)

    def entries(self) -> List[str]:
        with self._lock:
            return list(self._items)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
