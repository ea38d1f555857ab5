"""Byte classifier for the footnote scanner.

Maps a single byte value to the role it plays in the markup. Pure and
stateless: the same byte always has the same class, whatever the context.
Context (e.g. a flush marker inside an open footnote) is the processor's
concern.
"""

from __future__ import annotations

from enum import Enum, auto

OPEN = ord("(")
CLOSE = ord(")")
FLUSH = ord("#")


class ByteClass(Enum):
    """Symbol classes recognised by the scanner.

    - OPEN: starts a footnote
    - CLOSE: ends the innermost open footnote
    - FLUSH: dumps queued footnotes when outside any footnote
    - PLAIN: everything else
    """

    OPEN = auto()
    CLOSE = auto()
    FLUSH = auto()
    PLAIN = auto()


# Indexed by byte value; avoids a dict lookup per byte in the hot loop
_TABLE: tuple[ByteClass, ...] = tuple(
    ByteClass.OPEN
    if value == OPEN
    else ByteClass.CLOSE
    if value == CLOSE
    else ByteClass.FLUSH
    if value == FLUSH
    else ByteClass.PLAIN
    for value in range(256)
)


def classify(byte: int) -> ByteClass:
    """Classify one byte.

    Args:
        byte: Byte value in range 0-255 (as yielded by iterating ``bytes``)

    Returns:
        The ByteClass for that value.

    Example:
        >>> classify(ord("("))
        <ByteClass.OPEN: 1>
        >>> classify(ord("a"))
        <ByteClass.PLAIN: 4>
    """
    return _TABLE[byte]


__all__ = ["CLOSE", "FLUSH", "OPEN", "ByteClass", "classify"]
