"""Disk-backed footnote queue.

Keeps footnote bodies in an anonymous temporary file so that a large
backlog of undumped footnotes costs disk space rather than memory. Only
``(number, offset, length)`` triples are held in memory.

The spool file is truncated each time the queue drains empty, so a
document that flushes regularly never grows the file beyond its largest
backlog.

Usage:
    with SpooledFootnoteQueue() as queue:
        processor = ChunkProcessor(sink, queue=queue)
        ...

"""

from __future__ import annotations

import tempfile
from collections import deque
from typing import IO

from footmark.queues.protocol import FootnoteEntry


class SpooledFootnoteQueue:
    """FIFO footnote store whose bodies live in a temporary file.

    Thread Safety:
        Not thread-safe. Owned by a single processor.

    """

    __slots__ = ("_file", "_index", "_counter", "_write_offset")

    def __init__(self, directory: str | None = None) -> None:
        """Create the queue and its spool file.

        Args:
            directory: Where to create the temporary file (system default if None)
        """
        self._file: IO[bytes] | None = tempfile.TemporaryFile(dir=directory)
        self._index: deque[tuple[int, int, int]] = deque()
        self._counter = 0
        self._write_offset = 0

    def enqueue(self, body: bytes) -> int:
        spool = self._spool()
        spool.seek(self._write_offset)
        spool.write(body)
        self._counter += 1
        self._index.append((self._counter, self._write_offset, len(body)))
        self._write_offset += len(body)
        return self._counter

    def pop_front(self) -> FootnoteEntry | None:
        if not self._index:
            return None
        spool = self._spool()
        number, offset, length = self._index.popleft()
        spool.seek(offset)
        body = spool.read(length)
        if not self._index:
            # Drained: reuse the file from the start
            spool.seek(0)
            spool.truncate()
            self._write_offset = 0
        return FootnoteEntry(number, body)

    @property
    def issued(self) -> int:
        """Number of sequence numbers handed out so far."""
        return self._counter

    @property
    def closed(self) -> bool:
        return self._file is None

    def close(self) -> None:
        """Release the spool file. Pending entries are discarded."""
        if self._file is not None:
            self._file.close()
            self._file = None
            self._index.clear()

    def _spool(self) -> IO[bytes]:
        if self._file is None:
            raise ValueError("I/O operation on closed SpooledFootnoteQueue")
        return self._file

    def __len__(self) -> int:
        return len(self._index)

    def __enter__(self) -> SpooledFootnoteQueue:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
