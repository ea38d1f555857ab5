"""Output sinks.

- protocol.py: OutputSink protocol
- memory.py: BytesSink (in-memory, for tests and embedding)
- stream.py: StreamSink (files, stdout, any binary stream)
"""

from footmark.sinks.memory import BytesSink
from footmark.sinks.protocol import OutputSink
from footmark.sinks.stream import StreamSink

__all__ = ["BytesSink", "OutputSink", "StreamSink"]
