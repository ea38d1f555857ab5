"""Output wire format for references and footnote dumps.

Reference token:  ``^N``
Dump block:       ``\\n``, then ``\\nFN-N:<body>\\n`` per entry, then ``\\n``
                  after the last entry (entries end up separated by one
                  blank line). An empty dump is the prefix alone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from footmark.queues.protocol import FootnoteEntry

# Written once at the start of every drain
DUMP_PREFIX = b"\n"
# Written after the last entry of a non-empty drain
DUMP_SUFFIX = b"\n"


def format_reference(number: int) -> bytes:
    """Inline token that replaces a footnote in the text.

    Example:
        >>> format_reference(12)
        b'^12'
    """
    return b"^%d" % number


def format_entry(entry: FootnoteEntry) -> bytes:
    """Format one footnote for the dump block.

    The body is copied verbatim; no escaping or re-encoding is applied.

    Example:
        >>> format_entry(FootnoteEntry(3, b"see above"))
        b'\\nFN-3:see above\\n'
    """
    return b"\nFN-%d:%s\n" % (entry.number, entry.body)


__all__ = ["DUMP_PREFIX", "DUMP_SUFFIX", "format_entry", "format_reference"]
