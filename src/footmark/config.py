"""ContextVar-based processing configuration for Footmark.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A ChunkProcessor reads the active config once, when it is constructed.

Usage:
    # Explicit config
    processor = ChunkProcessor(sink, config=ProcessConfig(nesting=NestingMode.FLAT))

    # Or set it for everything built in the current context
    with process_config_context(ProcessConfig(chunk_size=4096)):
        convert_file("in.txt", "out.txt")

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from enum import Enum

DEFAULT_CHUNK_SIZE = 100


class NestingMode(Enum):
    """How footnotes opened inside other footnotes are handled.

    - NESTED: one buffer per depth level; inner footnotes become references
      inside the enclosing footnote body
    - FLAT: a single buffer shared by every level (text before an inner
      open marker leaks into the main text)
    """

    NESTED = "nested"
    FLAT = "flat"


class UnmatchedClosePolicy(Enum):
    """What to do with a close marker that has no open footnote."""

    PLAIN = "plain"  # Keep ")" as text
    DROP = "drop"  # Discard the byte
    ERROR = "error"  # Raise MalformedBracketingError


class UnterminatedPolicy(Enum):
    """What finalize() does with footnote text still open at end of stream."""

    FOOTNOTE = "footnote"  # Close it and queue it like any other footnote
    TEXT = "text"  # Emit the collected bytes as main text
    DROP = "drop"  # Discard them


class SinkErrorPolicy(Enum):
    """How stream sinks react to a failed write."""

    RAISE = "raise"
    LOG = "log"


_ENUM_FIELDS: dict[str, type[Enum]] = {
    "nesting": NestingMode,
    "unmatched_close": UnmatchedClosePolicy,
    "unterminated": UnterminatedPolicy,
    "sink_errors": SinkErrorPolicy,
}


@dataclass(frozen=True, slots=True)
class ProcessConfig:
    """Immutable processing configuration.

    Attributes:
        chunk_size: Bytes read per chunk by the pipeline
        nesting: Nested footnote handling
        unmatched_close: Policy for ")" at depth zero
        unterminated: Policy for an open footnote at end of stream
        sink_errors: Policy for failed writes in stream sinks

    """

    chunk_size: int = DEFAULT_CHUNK_SIZE
    nesting: NestingMode = NestingMode.NESTED
    unmatched_close: UnmatchedClosePolicy = UnmatchedClosePolicy.PLAIN
    unterminated: UnterminatedPolicy = UnterminatedPolicy.FOOTNOTE
    sink_errors: SinkErrorPolicy = SinkErrorPolicy.RAISE

    def __post_init__(self) -> None:
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be at least 1, got {self.chunk_size}")
        for name, enum_type in _ENUM_FIELDS.items():
            value = getattr(self, name)
            if not isinstance(value, enum_type):
                # Frozen dataclass: coerce through object.__setattr__
                object.__setattr__(self, name, enum_type(value))

    @classmethod
    def from_dict(cls, config_dict: dict) -> ProcessConfig:
        """Create ProcessConfig from dictionary.

        Only includes keys that are valid ProcessConfig fields; unknown keys
        are silently ignored. Enum fields accept their string values.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ProcessConfig attribute names.

        Returns:
            New ProcessConfig instance with values from dict.

        Raises:
            ValueError: If an enum value or chunk_size is invalid.

        Example:
            >>> config = ProcessConfig.from_dict({
            ...     "nesting": "flat",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.nesting
            <NestingMode.FLAT: 'flat'>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ProcessConfig = ProcessConfig()

_process_config: ContextVar[ProcessConfig] = ContextVar(
    "process_config",
    default=_DEFAULT_CONFIG,
)


def get_process_config() -> ProcessConfig:
    """Get current processing configuration (thread-local)."""
    return _process_config.get()


def set_process_config(config: ProcessConfig) -> None:
    """Set processing configuration for current context.

    Args:
        config: ProcessConfig instance to use for this context.
    """
    _process_config.set(config)


def reset_process_config() -> None:
    """Reset to the default configuration."""
    _process_config.set(_DEFAULT_CONFIG)


@contextmanager
def process_config_context(config: ProcessConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: ProcessConfig to use within the context.

    Yields:
        None
    """
    previous = _process_config.get()
    _process_config.set(config)
    try:
        yield
    finally:
        _process_config.set(previous)


__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "NestingMode",
    "ProcessConfig",
    "SinkErrorPolicy",
    "UnmatchedClosePolicy",
    "UnterminatedPolicy",
    "get_process_config",
    "process_config_context",
    "reset_process_config",
    "set_process_config",
]
