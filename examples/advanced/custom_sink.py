"""Plug in your own OutputSink.

Any object with ``accept(bytes)`` and ``end_of_stream()`` works. This one
collects the output and reports how many writes it received.
"""

from footmark import ChunkProcessor


class CountingSink:
    def __init__(self) -> None:
        self.parts: list[bytes] = []

    def accept(self, data: bytes) -> None:
        self.parts.append(data)

    def end_of_stream(self) -> None:
        print(f"{len(self.parts)} writes, {sum(map(len, self.parts))} bytes")


sink = CountingSink()
processor = ChunkProcessor(sink)
for chunk in (b"Streams(arrive", b" in pieces) and", b" still(work)#"):
    processor.process(chunk)
processor.finalize()
print(b"".join(sink.parts).decode())
