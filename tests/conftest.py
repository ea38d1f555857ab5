"""Shared fixtures and helpers for Footmark tests."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import pytest

from footmark import BytesSink, ChunkProcessor, ProcessConfig, reset_process_config


def run_chunks(chunks: Iterable[bytes], config: ProcessConfig | None = None) -> bytes:
    """Feed chunks to a fresh processor, finalize, and return the output."""
    sink = BytesSink()
    processor = ChunkProcessor(sink, config=config or ProcessConfig())
    for chunk in chunks:
        processor.process(chunk)
    processor.finalize()
    return sink.getvalue()


@pytest.fixture(autouse=True)
def _reset_config() -> Iterator[None]:
    """Never leak a ContextVar config between tests."""
    yield
    reset_process_config()
