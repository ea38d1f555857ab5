"""Footnote queue implementations.

- protocol.py: FootnoteQueue protocol, FootnoteEntry
- memory.py: MemoryFootnoteQueue (deque)
- spool.py: SpooledFootnoteQueue (temporary file)
"""

from footmark.queues.memory import MemoryFootnoteQueue
from footmark.queues.protocol import FootnoteEntry, FootnoteQueue
from footmark.queues.spool import SpooledFootnoteQueue

__all__ = [
    "FootnoteEntry",
    "FootnoteQueue",
    "MemoryFootnoteQueue",
    "SpooledFootnoteQueue",
]
