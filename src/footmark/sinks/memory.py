"""In-memory output sink."""

from __future__ import annotations

from footmark.errors import ProcessorStateError


class BytesSink:
    """Collects output in a bytearray.

    Usage:
            >>> sink = BytesSink()
            >>> sink.accept(b"Hello")
            >>> sink.end_of_stream()
            >>> sink.getvalue()
            b'Hello'

    """

    __slots__ = ("_buffer", "_ended", "writes")

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._ended = False
        self.writes = 0  # Number of accept() calls

    def accept(self, data: bytes) -> None:
        if self._ended:
            raise ProcessorStateError("accept() called after end_of_stream()")
        self._buffer += data
        self.writes += 1

    def end_of_stream(self) -> None:
        if self._ended:
            raise ProcessorStateError("end_of_stream() called twice")
        self._ended = True

    @property
    def ended(self) -> bool:
        return self._ended

    def getvalue(self) -> bytes:
        """Return everything accepted so far."""
        return bytes(self._buffer)
