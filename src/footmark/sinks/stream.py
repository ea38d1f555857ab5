"""Output sink writing to a binary stream.

Works with any object exposing ``write`` and ``flush``: an open file,
``sys.stdout.buffer``, a socket file, ``io.BytesIO``.
"""

from __future__ import annotations

import contextlib
from typing import BinaryIO

from footmark.config import SinkErrorPolicy, get_process_config
from footmark.errors import ProcessorStateError, SinkWriteError
from footmark.utils.logger import get_logger

logger = get_logger(__name__)


class StreamSink:
    """Writes accepted bytes to a binary stream.

    Under ``SinkErrorPolicy.RAISE`` a failed write raises ``SinkWriteError``
    chained to the underlying ``OSError``. Under ``SinkErrorPolicy.LOG`` the
    failure is logged, the bytes are lost, and processing continues.

    The stream is flushed on end of stream and closed only when the sink
    owns it.

    """

    __slots__ = ("_stream", "_owns_stream", "_on_error", "_ended", "bytes_written", "failures")

    def __init__(
        self,
        stream: BinaryIO,
        *,
        owns_stream: bool = False,
        on_error: SinkErrorPolicy | None = None,
    ) -> None:
        """Wrap a binary stream.

        Args:
            stream: Destination stream, opened for binary writing
            owns_stream: Close the stream at end of stream
            on_error: Write failure policy (active config if None)
        """
        self._stream = stream
        self._owns_stream = owns_stream
        self._on_error = on_error or get_process_config().sink_errors
        self._ended = False
        self.bytes_written = 0
        self.failures = 0

    def accept(self, data: bytes) -> None:
        if self._ended:
            raise ProcessorStateError("accept() called after end_of_stream()")
        try:
            self._stream.write(data)
        except OSError as err:
            self._fail("write", err)
            return
        self.bytes_written += len(data)

    def end_of_stream(self) -> None:
        if self._ended:
            raise ProcessorStateError("end_of_stream() called twice")
        self._ended = True
        try:
            self._stream.flush()
        except OSError as err:
            self.abort()
            self._fail("flush", err)
            return
        if self._owns_stream:
            try:
                self._stream.close()
            except OSError as err:
                self._fail("close", err)

    def abort(self) -> None:
        """Release an owned stream after a failure, without reporting again.

        A buffered file retries its failed flush on close; that second
        failure belongs to the error already being reported.
        """
        if self._owns_stream and not self._stream.closed:
            with contextlib.suppress(OSError):
                self._stream.close()

    @property
    def ended(self) -> bool:
        return self._ended

    def _fail(self, operation: str, err: OSError) -> None:
        self.failures += 1
        if self._on_error is SinkErrorPolicy.RAISE:
            raise SinkWriteError(f"Output {operation} failed: {err}") from err
        logger.warning("Output %s failed, continuing: %s", operation, err)
