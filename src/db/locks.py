"""One lock per user pair key, so moves of the same game are serialized while different games run in parallel."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager


class KeyedLocks:
    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}
        self._users: dict[str, int] = {}  # callers holding or waiting for each lock

    @contextmanager
    def lock(self, key: str) -> Iterator[None]:
        """Exclusive access to the key for the duration of the with block.

        A lock is dropped once nobody holds or waits for it. Waiters register under the guard before blocking,
        so a key never has two live locks at the same time.
        """
        with self._guard:
            key_lock = self._locks.setdefault(key, threading.Lock())
            self._users[key] = self._users.get(key, 0) + 1
        try:
            with key_lock:
                yield
        finally:
            with self._guard:
                self._users[key] -= 1
                if self._users[key] == 0:
                    del self._users[key]
                    del self._locks[key]

    def __len__(self) -> int:
        return len(self._locks)
