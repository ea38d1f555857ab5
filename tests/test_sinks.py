"""Tests for output sinks."""

import errno
import io
import logging

import pytest

from footmark.config import SinkErrorPolicy
from footmark.errors import MidStreamIOError, ProcessorStateError, SinkWriteError
from footmark.sinks import BytesSink, StreamSink


class BrokenStream(io.BytesIO):
    """Binary stream whose writes fail after ``ok_writes`` successes."""

    def __init__(self, ok_writes: int = 0) -> None:
        super().__init__()
        self.ok_writes = ok_writes

    def write(self, data) -> int:  # type: ignore[override]
        if self.ok_writes <= 0:
            raise OSError(28, "No space left on device")
        self.ok_writes -= 1
        return super().write(data)


class FullDevice(io.RawIOBase):
    """Raw file that accepts nothing, like /dev/full."""

    def writable(self) -> bool:
        return True

    def write(self, data) -> int:  # type: ignore[override]
        raise OSError(errno.ENOSPC, "No space left on device")


class StubbornClose(io.BytesIO):
    """Stream whose first close() fails."""

    def __init__(self) -> None:
        super().__init__()
        self.close_attempts = 0

    def close(self) -> None:
        self.close_attempts += 1
        if self.close_attempts == 1:
            raise OSError(errno.EIO, "Input/output error")
        super().close()


class TestBytesSink:
    """In-memory sink."""

    def test_collects_in_order(self) -> None:
        sink = BytesSink()
        sink.accept(b"ab")
        sink.accept(b"cd")
        assert sink.getvalue() == b"abcd"
        assert sink.writes == 2

    def test_end_of_stream_once(self) -> None:
        sink = BytesSink()
        sink.end_of_stream()
        assert sink.ended
        with pytest.raises(ProcessorStateError):
            sink.end_of_stream()

    def test_accept_after_end_raises(self) -> None:
        sink = BytesSink()
        sink.end_of_stream()
        with pytest.raises(ProcessorStateError):
            sink.accept(b"late")


class TestStreamSink:
    """Binary stream sink."""

    def test_writes_through(self) -> None:
        stream = io.BytesIO()
        sink = StreamSink(stream)
        sink.accept(b"Hello")
        sink.end_of_stream()
        assert stream.getvalue() == b"Hello"
        assert sink.bytes_written == 5

    def test_borrowed_stream_left_open(self) -> None:
        stream = io.BytesIO()
        StreamSink(stream).end_of_stream()
        assert not stream.closed

    def test_owned_stream_closed(self) -> None:
        stream = io.BytesIO()
        StreamSink(stream, owns_stream=True).end_of_stream()
        assert stream.closed

    def test_accept_after_end_raises(self) -> None:
        sink = StreamSink(io.BytesIO())
        sink.end_of_stream()
        with pytest.raises(ProcessorStateError):
            sink.accept(b"x")

    def test_write_failure_raises(self) -> None:
        sink = StreamSink(BrokenStream(), on_error=SinkErrorPolicy.RAISE)
        with pytest.raises(SinkWriteError) as exc_info:
            sink.accept(b"data")
        assert isinstance(exc_info.value.__cause__, OSError)
        assert isinstance(exc_info.value, MidStreamIOError)
        assert sink.failures == 1

    def test_write_failure_logged_under_log_policy(self, caplog) -> None:
        stream = BrokenStream(ok_writes=1)
        sink = StreamSink(stream, on_error=SinkErrorPolicy.LOG)
        with caplog.at_level(logging.WARNING, logger="footmark"):
            sink.accept(b"kept")
            sink.accept(b"lost")
            sink.end_of_stream()
        assert stream.getvalue() == b"kept"
        assert sink.failures == 1
        assert sink.bytes_written == 4
        assert "Output write failed" in caplog.text
        assert [r.levelno for r in caplog.records] == [logging.WARNING]

    def test_policy_defaults_to_active_config(self) -> None:
        from footmark.config import ProcessConfig, process_config_context

        with process_config_context(ProcessConfig(sink_errors=SinkErrorPolicy.LOG)):
            sink = StreamSink(BrokenStream())
        sink.accept(b"x")  # No exception
        assert sink.failures == 1


class TestBufferedFailures:
    """Failures surfacing through a real buffered writer.

    A BufferedWriter holds small writes until flush; closing it retries the
    flush, so the same failure can surface twice.
    """

    def test_failed_flush_reported_as_sink_error(self) -> None:
        stream = io.BufferedWriter(FullDevice())
        sink = StreamSink(stream, owns_stream=True, on_error=SinkErrorPolicy.RAISE)
        sink.accept(b"Hello")  # Buffered, nothing reaches the device yet
        with pytest.raises(SinkWriteError, match="Output flush failed"):
            sink.end_of_stream()
        assert stream.closed
        assert sink.failures == 1

    def test_failed_flush_logged_once(self, caplog) -> None:
        stream = io.BufferedWriter(FullDevice())
        sink = StreamSink(stream, owns_stream=True, on_error=SinkErrorPolicy.LOG)
        sink.accept(b"Hello")
        with caplog.at_level(logging.WARNING, logger="footmark"):
            sink.end_of_stream()
        assert stream.closed
        assert sink.failures == 1
        assert len(caplog.records) == 1

    def test_oversized_write_fails_in_accept(self) -> None:
        stream = io.BufferedWriter(FullDevice(), buffer_size=16)
        sink = StreamSink(stream, owns_stream=True, on_error=SinkErrorPolicy.RAISE)
        with pytest.raises(SinkWriteError, match="Output write failed"):
            sink.accept(b"x" * 1024)
        sink.abort()  # Retried flush fails again, silently
        assert stream.closed
        assert not sink.ended

    def test_abort_leaves_borrowed_stream_open(self) -> None:
        stream = io.BytesIO()
        StreamSink(stream).abort()
        assert not stream.closed

    def test_close_failure_raises(self) -> None:
        stream = StubbornClose()
        sink = StreamSink(stream, owns_stream=True, on_error=SinkErrorPolicy.RAISE)
        sink.accept(b"done")
        with pytest.raises(SinkWriteError, match="Output close failed"):
            sink.end_of_stream()
        assert sink.ended
        stream.close()

    def test_close_failure_logged(self, caplog) -> None:
        stream = StubbornClose()
        sink = StreamSink(stream, owns_stream=True, on_error=SinkErrorPolicy.LOG)
        with caplog.at_level(logging.WARNING, logger="footmark"):
            sink.end_of_stream()
        assert sink.failures == 1
        assert "Output close failed" in caplog.text
        stream.close()
