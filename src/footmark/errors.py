"""Exception classes for Footmark.

Provides standardized exceptions for error handling throughout Footmark.

Startup failures (InputUnavailableError, OutputUnavailableError) are raised
before any byte reaches the processor. Failures during processing
(MidStreamIOError, SinkWriteError, MalformedBracketingError) abort the run.
"""

from __future__ import annotations


class FootmarkError(Exception):
    """Base exception for all Footmark errors.

    Subclass this for specific error categories.
    """

    pass


class _PathError(FootmarkError):
    """Shared formatting for errors tied to a filesystem path."""

    role = "path"

    def __init__(self, path: str, reason: str | None = None) -> None:
        """Initialize path error.

        Args:
            path: The path that could not be opened
            reason: Optional description of the underlying failure
        """
        self.path = path
        self.reason = reason

        message = f"Cannot open {self.role} '{path}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class InputUnavailableError(_PathError):
    """The input document could not be opened for reading."""

    role = "input"


class OutputUnavailableError(_PathError):
    """The output destination could not be opened for writing."""

    role = "output"


class MidStreamIOError(FootmarkError):
    """A read or write failed after processing started.

    The run is aborted; output written so far is left as is.
    """

    pass


class SinkWriteError(MidStreamIOError):
    """An output sink failed to write bytes it accepted."""

    pass


class MalformedBracketingError(FootmarkError):
    """A close marker arrived with no open footnote.

    Only raised under UnmatchedClosePolicy.ERROR.
    """

    def __init__(self, offset: int) -> None:
        """Initialize malformed bracketing error.

        Args:
            offset: Zero-based byte offset of the marker in the logical stream
        """
        self.offset = offset
        super().__init__(f"Unmatched ')' at byte offset {offset}")


class ProcessorStateError(FootmarkError):
    """A processor or sink was used after end of stream."""

    pass
