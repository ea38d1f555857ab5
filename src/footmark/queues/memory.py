"""In-memory footnote queue."""

from __future__ import annotations

from collections import deque

from footmark.queues.protocol import FootnoteEntry


class MemoryFootnoteQueue:
    """FIFO footnote store backed by a deque.

    Usage:
            >>> queue = MemoryFootnoteQueue()
            >>> queue.enqueue(b"first")
            1
            >>> queue.pop_front()
            FootnoteEntry(number=1, body=b'first')
            >>> queue.enqueue(b"second")
            2

    """

    __slots__ = ("_entries", "_counter")

    def __init__(self) -> None:
        self._entries: deque[FootnoteEntry] = deque()
        self._counter = 0

    def enqueue(self, body: bytes) -> int:
        self._counter += 1
        self._entries.append(FootnoteEntry(self._counter, bytes(body)))
        return self._counter

    def pop_front(self) -> FootnoteEntry | None:
        if not self._entries:
            return None
        return self._entries.popleft()

    @property
    def issued(self) -> int:
        """Number of sequence numbers handed out so far."""
        return self._counter

    def __len__(self) -> int:
        return len(self._entries)
