"""
Footmark — streaming inline-footnote extraction.

Replaces every ``(footnote)`` in a byte stream with a ``^N`` reference and
dumps the collected footnote bodies wherever a ``#`` appears outside a
footnote, plus once more at end of stream. Input is processed in chunks, so
documents of any size can be converted in bounded memory.

Quick Start:
    >>> from footmark import convert_bytes
    >>> convert_bytes(b"Hello(world)#")
    b'Hello^1\\n\\nFN-1:world\\n\\n'

    >>> # Incremental use with your own sink
    >>> from footmark import BytesSink, ChunkProcessor
    >>> sink = BytesSink()
    >>> processor = ChunkProcessor(sink)
    >>> for chunk in (b"A(x", b")(y)", b"#"):
    ...     processor.process(chunk)
    >>> processor.finalize()
    >>> sink.getvalue()
    b'A^1^2\\n\\nFN-1:x\\n\\nFN-2:y\\n\\n'

Command line:
    footmark input.txt output.txt
"""

__version__ = "0.1.0"

from footmark.classifier import ByteClass, classify
from footmark.config import (
    NestingMode,
    ProcessConfig,
    SinkErrorPolicy,
    UnmatchedClosePolicy,
    UnterminatedPolicy,
    get_process_config,
    process_config_context,
    reset_process_config,
    set_process_config,
)
from footmark.errors import (
    FootmarkError,
    InputUnavailableError,
    MalformedBracketingError,
    MidStreamIOError,
    OutputUnavailableError,
    ProcessorStateError,
    SinkWriteError,
)
from footmark.pipeline import convert_bytes, convert_file, convert_stream, iter_chunks
from footmark.processor import ChunkProcessor
from footmark.queues import FootnoteEntry, FootnoteQueue, MemoryFootnoteQueue, SpooledFootnoteQueue
from footmark.sinks import BytesSink, OutputSink, StreamSink

__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "ChunkProcessor",
    "convert_bytes",
    "convert_file",
    "convert_stream",
    "iter_chunks",
    # Classifier
    "ByteClass",
    "classify",
    # Queues
    "FootnoteEntry",
    "FootnoteQueue",
    "MemoryFootnoteQueue",
    "SpooledFootnoteQueue",
    # Sinks
    "BytesSink",
    "OutputSink",
    "StreamSink",
    # Configuration (ContextVar-based)
    "NestingMode",
    "ProcessConfig",
    "SinkErrorPolicy",
    "UnmatchedClosePolicy",
    "UnterminatedPolicy",
    "get_process_config",
    "set_process_config",
    "reset_process_config",
    "process_config_context",
    # Errors
    "FootmarkError",
    "InputUnavailableError",
    "MalformedBracketingError",
    "MidStreamIOError",
    "OutputUnavailableError",
    "ProcessorStateError",
    "SinkWriteError",
]
