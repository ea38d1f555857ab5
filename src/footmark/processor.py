"""Stateful footnote extraction engine.

Consumes a byte stream chunk by chunk, replaces each ``(footnote)`` with a
``^N`` reference, and dumps queued footnote bodies wherever a ``#`` appears
outside a footnote (and once more at end of stream).

Output depends only on the logical byte stream, never on where chunk
boundaries fall. Text outside footnotes is emitted as soon as it is
complete (at the next open marker, flush marker, or chunk end), so memory
holds at most the open footnote(s) plus the undumped queue.

Thread Safety:
    Processor instances are single-use and single-owner. Feed chunks from
    one thread, in stream order.

"""

from __future__ import annotations

from footmark.classifier import ByteClass, classify
from footmark.config import (
    NestingMode,
    ProcessConfig,
    UnmatchedClosePolicy,
    UnterminatedPolicy,
    get_process_config,
)
from footmark.errors import MalformedBracketingError, ProcessorStateError
from footmark.formatting import DUMP_PREFIX, DUMP_SUFFIX, format_entry, format_reference
from footmark.queues.memory import MemoryFootnoteQueue
from footmark.queues.protocol import FootnoteQueue
from footmark.sinks.protocol import OutputSink
from footmark.utils.logger import get_logger

logger = get_logger(__name__)


class ChunkProcessor:
    """Footnote extraction state machine.

    Usage:
            >>> sink = BytesSink()
            >>> processor = ChunkProcessor(sink)
            >>> processor.process(b"Hello(wor")
            >>> processor.process(b"ld)#")
            >>> processor.finalize()
            >>> sink.getvalue()
            b'Hello^1\\n\\nFN-1:world\\n\\n'

    State:
        - one pending buffer per open depth level (NESTED) or a single
          shared buffer (FLAT); index 0 holds main text
        - bracket depth
        - the footnote queue

    """

    __slots__ = (
        "_sink",
        "_queue",
        "_config",
        "_nested",
        "_buffers",
        "_depth",
        "_offset",  # Bytes consumed before the current chunk
        "_issued",
        "_finalized",
    )

    def __init__(
        self,
        sink: OutputSink,
        *,
        queue: FootnoteQueue | None = None,
        config: ProcessConfig | None = None,
    ) -> None:
        """Initialize processor.

        Args:
            sink: Destination for output bytes
            queue: Footnote store (fresh MemoryFootnoteQueue if None)
            config: Processing policies (active config if None)
        """
        self._sink = sink
        self._queue: FootnoteQueue = queue if queue is not None else MemoryFootnoteQueue()
        self._config = config or get_process_config()
        self._nested = self._config.nesting is NestingMode.NESTED
        self._buffers: list[bytearray] = [bytearray()]
        self._depth = 0
        self._offset = 0
        self._issued = 0
        self._finalized = False

    # =========================================================================
    # Public API
    # =========================================================================

    def process(self, chunk: bytes) -> None:
        """Consume the next chunk of the stream.

        Args:
            chunk: Bytes immediately following the previous chunk

        Raises:
            ProcessorStateError: If called after finalize()
            MalformedBracketingError: Unmatched ")" under the ERROR policy
            SinkWriteError: If the sink fails to write
        """
        if self._finalized:
            raise ProcessorStateError("process() called after finalize()")

        for index, byte in enumerate(chunk):
            kind = classify(byte)
            if kind is ByteClass.OPEN:
                self._open()
            elif kind is ByteClass.CLOSE:
                if self._depth > 0:
                    self._close()
                else:
                    self._unmatched_close(byte, self._offset + index)
            elif kind is ByteClass.FLUSH and self._depth == 0:
                self._emit_pending()
                self._drain(always=True)
            else:
                # Plain bytes, and flush markers inside a footnote
                self._buffers[-1].append(byte)

        self._offset += len(chunk)

        # Main text is complete at a chunk boundary; open footnotes are not
        if self._depth == 0:
            self._emit_pending()

    def finalize(self) -> None:
        """Handle end of stream.

        Resolves any unterminated footnote per the configured policy, dumps
        whatever is still queued, then signals end of stream to the sink.

        Raises:
            ProcessorStateError: If called more than once
        """
        if self._finalized:
            raise ProcessorStateError("finalize() called twice")
        self._finalized = True

        if self._depth > 0:
            self._resolve_unterminated()
        self._emit_pending()
        self._drain(always=False)

        logger.debug(
            "Finalized after %d byte(s), %d footnote(s)", self._offset, self._issued
        )
        self._sink.end_of_stream()

    @property
    def depth(self) -> int:
        """Number of currently open footnotes."""
        return self._depth

    @property
    def pending(self) -> bytes:
        """Bytes collected but not yet emitted or queued."""
        return b"".join(self._buffers)

    @property
    def footnote_count(self) -> int:
        """Sequence numbers issued so far."""
        return self._issued

    @property
    def finalized(self) -> bool:
        return self._finalized

    # =========================================================================
    # Marker handling
    # =========================================================================

    def _open(self) -> None:
        if self._nested:
            if self._depth == 0:
                self._emit_pending()
            self._buffers.append(bytearray())
        else:
            # FLAT: whatever was collected so far is main text, at any depth
            self._emit_pending()
        self._depth += 1

    def _close(self) -> None:
        self._depth -= 1
        if self._nested:
            body = self._buffers.pop()
        else:
            body = self._buffers[0]

        if not body:
            # "()" is dropped: no entry, no reference
            return

        self._issued = self._queue.enqueue(bytes(body))
        token = format_reference(self._issued)
        if self._nested:
            if self._depth == 0:
                self._sink.accept(token)
            else:
                self._buffers[-1] += token
        else:
            body.clear()
            self._sink.accept(token)

    def _unmatched_close(self, byte: int, offset: int) -> None:
        policy = self._config.unmatched_close
        if policy is UnmatchedClosePolicy.ERROR:
            raise MalformedBracketingError(offset)
        if policy is UnmatchedClosePolicy.PLAIN:
            self._buffers[0].append(byte)
        logger.warning("Unmatched ')' at byte offset %d (%s)", offset, policy.value)

    def _resolve_unterminated(self) -> None:
        policy = self._config.unterminated
        logger.warning(
            "Unterminated footnote at end of stream: %d open, %d byte(s) pending (%s)",
            self._depth,
            len(self.pending),
            policy.value,
        )
        if policy is UnterminatedPolicy.FOOTNOTE:
            while self._depth > 0:
                self._close()
            return

        collected = self.pending
        self._buffers = [bytearray()]
        self._depth = 0
        if policy is UnterminatedPolicy.TEXT and collected:
            self._sink.accept(collected)

    # =========================================================================
    # Emission
    # =========================================================================

    def _emit_pending(self) -> None:
        """Send main text collected so far to the sink and clear it."""
        buffer = self._buffers[0]
        if buffer:
            self._sink.accept(bytes(buffer))
            buffer.clear()

    def _drain(self, *, always: bool) -> None:
        """Dump every queued footnote, oldest first.

        Args:
            always: Emit the dump prefix even when the queue is empty
                (explicit flush markers do; end of stream does not)
        """
        entry = self._queue.pop_front()
        if entry is None and not always:
            return

        self._sink.accept(DUMP_PREFIX)
        count = 0
        while entry is not None:
            self._sink.accept(format_entry(entry))
            count += 1
            entry = self._queue.pop_front()
        if count:
            self._sink.accept(DUMP_SUFFIX)
        logger.debug("Dumped %d footnote(s)", count)
