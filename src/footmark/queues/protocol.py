"""FootnoteQueue protocol and entry type.

A queue stores footnote bodies between the moment their footnote closes
and the moment they are dumped. Implementations must:

- number entries 1, 2, 3, ... in enqueue order, for the queue's whole
  lifetime (draining never resets the counter)
- pop strictly in enqueue order

Thread Safety:
    Queues are owned by a single ChunkProcessor and are not safe for
    concurrent use.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class FootnoteEntry:
    """A closed footnote awaiting its dump.

    Attributes:
        number: Sequence number (1-based, never reused)
        body: Raw footnote bytes, as written between the markers
    """

    number: int
    body: bytes


class FootnoteQueue(Protocol):
    """Protocol for footnote stores.

    The built-in ``MemoryFootnoteQueue`` and ``SpooledFootnoteQueue``
    conform to this protocol.
    """

    def enqueue(self, body: bytes) -> int:
        """Append a body and return its newly assigned sequence number."""
        ...

    def pop_front(self) -> FootnoteEntry | None:
        """Remove and return the oldest entry, or None when empty."""
        ...
