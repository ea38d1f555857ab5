"""OutputSink protocol — destination for processed bytes.

A sink receives finished output in order through ``accept`` and a single
``end_of_stream`` signal once the processor has finalized. Sinks report
their own write failures by raising ``SinkWriteError``.

Example:
    from footmark.sinks.protocol import OutputSink

    def emit_all(sink: OutputSink, parts: list[bytes]) -> None:
        for part in parts:
            sink.accept(part)
        sink.end_of_stream()

"""

from __future__ import annotations

from typing import Protocol


class OutputSink(Protocol):
    """Protocol for output sinks.

    The built-in ``BytesSink`` and ``StreamSink`` conform to this protocol.

    """

    def accept(self, data: bytes) -> None:
        """Append bytes to the output."""
        ...

    def end_of_stream(self) -> None:
        """Signal that no more data will arrive. Called at most once."""
        ...
