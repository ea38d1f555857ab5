"""Drive a ChunkProcessor from a byte source.

Reads fixed-size chunks, feeds them in order, finalizes once at EOF.
Opening paths happens before the processor exists, so startup failures
never reach it.

Example:
    >>> convert_bytes(b"Hello(world)#")
    b'Hello^1\\n\\nFN-1:world\\n\\n'

    >>> convert_file("draft.txt", "final.txt", config=ProcessConfig(chunk_size=4096))

"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Iterator
from typing import BinaryIO

from footmark.config import ProcessConfig, get_process_config
from footmark.errors import InputUnavailableError, MidStreamIOError, OutputUnavailableError
from footmark.processor import ChunkProcessor
from footmark.queues.protocol import FootnoteQueue
from footmark.sinks.memory import BytesSink
from footmark.sinks.protocol import OutputSink
from footmark.sinks.stream import StreamSink
from footmark.utils.logger import get_logger

logger = get_logger(__name__)

# Output path meaning "write to standard output"
STDOUT_PATH = "-"


def iter_chunks(source: BinaryIO, chunk_size: int) -> Iterator[bytes]:
    """Yield successive chunks from a binary stream until EOF.

    Args:
        source: Stream opened for binary reading
        chunk_size: Maximum bytes per chunk

    Yields:
        Non-empty byte chunks, in stream order

    Raises:
        MidStreamIOError: If a read fails
    """
    while True:
        try:
            chunk = source.read(chunk_size)
        except OSError as err:
            raise MidStreamIOError(f"Input read failed: {err}") from err
        if not chunk:
            return
        yield chunk


def run(
    chunks: Iterable[bytes],
    sink: OutputSink,
    *,
    queue: FootnoteQueue | None = None,
    config: ProcessConfig | None = None,
) -> ChunkProcessor:
    """Feed every chunk to a new processor, then finalize it.

    Any error aborts immediately; the remaining chunks are not consumed
    and the sink receives no end-of-stream signal.

    Returns:
        The finalized processor (for its counters)
    """
    processor = ChunkProcessor(sink, queue=queue, config=config)
    for chunk in chunks:
        processor.process(chunk)
    processor.finalize()
    return processor


def convert_stream(
    source: BinaryIO,
    sink: OutputSink,
    *,
    queue: FootnoteQueue | None = None,
    config: ProcessConfig | None = None,
) -> ChunkProcessor:
    """Process a whole binary stream into a sink."""
    config = config or get_process_config()
    return run(iter_chunks(source, config.chunk_size), sink, queue=queue, config=config)


def convert_bytes(data: bytes, *, config: ProcessConfig | None = None) -> bytes:
    """Process an in-memory document and return the output.

    Chunking follows ``config.chunk_size`` so the result matches what
    ``convert_file`` would write.
    """
    config = config or get_process_config()
    size = config.chunk_size
    sink = BytesSink()
    run((data[i : i + size] for i in range(0, len(data), size)), sink, config=config)
    return sink.getvalue()


def convert_file(
    input_path: str,
    output_path: str,
    *,
    append: bool = False,
    queue: FootnoteQueue | None = None,
    config: ProcessConfig | None = None,
) -> ChunkProcessor:
    """Process ``input_path`` into ``output_path``.

    Args:
        input_path: Document to read
        output_path: Destination file, or "-" for standard output
        append: Append to the output file instead of truncating it
        queue: Footnote store (in-memory if None)
        config: Processing policies (active config if None)

    Returns:
        The finalized processor

    Raises:
        InputUnavailableError: Input cannot be opened; nothing was written
        OutputUnavailableError: Output cannot be opened, or is the input
            file itself; nothing was read
        MidStreamIOError: A read or write failed partway through
    """
    config = config or get_process_config()

    try:
        source = open(input_path, "rb")
    except OSError as err:
        raise InputUnavailableError(input_path, err.strerror or str(err)) from err

    with source:
        if output_path == STDOUT_PATH:
            sink = StreamSink(sys.stdout.buffer, on_error=config.sink_errors)
        else:
            if _same_file(input_path, output_path):
                # Opening with "wb" would truncate the input before it is read
                raise OutputUnavailableError(output_path, "same file as input")
            try:
                target = open(output_path, "ab" if append else "wb")
            except OSError as err:
                raise OutputUnavailableError(output_path, err.strerror or str(err)) from err
            sink = StreamSink(target, owns_stream=True, on_error=config.sink_errors)

        try:
            processor = convert_stream(source, sink, queue=queue, config=config)
        finally:
            # end_of_stream() already closed it on success
            if not sink.ended:
                sink.abort()

    logger.info(
        "Converted %s -> %s (%d footnote(s))",
        input_path,
        output_path,
        processor.footnote_count,
    )
    return processor


def _same_file(input_path: str, output_path: str) -> bool:
    try:
        return os.path.samefile(input_path, output_path)
    except OSError:
        # Output does not exist yet
        return False


__all__ = [
    "STDOUT_PATH",
    "convert_bytes",
    "convert_file",
    "convert_stream",
    "iter_chunks",
    "run",
]
