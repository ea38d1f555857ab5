"""Logger lookup for Footmark modules.

Every Footmark logger lives under the ``footmark`` namespace, so one
``logging.getLogger("footmark")`` handler (or ``caplog`` in tests) sees
processor warnings and sink failures alike. Footmark never configures
handlers itself; the CLI calls ``logging.basicConfig``.

Example:
    >>> from footmark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.warning("Unterminated footnote at end of stream")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the ``footmark`` namespace.

    Module names already under ``footmark`` are used as they are.

    Example:
        >>> get_logger("footmark.sinks.stream").name
        'footmark.sinks.stream'
        >>> get_logger("spool").name
        'footmark.spool'
    """
    if not (name == "footmark" or name.startswith("footmark.")):
        name = f"footmark.{name}"
    return logging.getLogger(name)
