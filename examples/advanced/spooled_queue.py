"""Stream a large document through a disk-backed footnote queue.

Footnotes that pile up between flush markers are kept in a temporary
file instead of memory. Output goes to standard output.

Usage:
    python examples/advanced/spooled_queue.py INPUT
"""

import sys

from footmark import ProcessConfig, SpooledFootnoteQueue, StreamSink, convert_stream


def main(path: str) -> None:
    config = ProcessConfig(chunk_size=64 * 1024)
    sink = StreamSink(sys.stdout.buffer)
    with open(path, "rb") as source, SpooledFootnoteQueue() as queue:
        processor = convert_stream(source, sink, queue=queue, config=config)
    print(f"\n[{processor.footnote_count} footnotes]", file=sys.stderr)


if __name__ == "__main__":
    main(sys.argv[1])
