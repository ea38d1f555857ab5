"""Tests for the command-line interface."""

import os

import pytest

from footmark.cli import (
    EXIT_FAILED,
    EXIT_INPUT_UNAVAILABLE,
    EXIT_OK,
    EXIT_OUTPUT_UNAVAILABLE,
    build_parser,
    main,
)


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "in.txt"
    path.write_bytes(b"Hello(world)#")
    return path


class TestMain:
    """Exit codes and side effects."""

    def test_success(self, source, tmp_path) -> None:
        target = tmp_path / "out.txt"
        assert main([str(source), str(target)]) == EXIT_OK
        assert target.read_bytes() == b"Hello^1\n\nFN-1:world\n\n"

    def test_missing_input(self, tmp_path, capsys) -> None:
        code = main([str(tmp_path / "nope.txt"), str(tmp_path / "out.txt")])
        assert code == EXIT_INPUT_UNAVAILABLE
        assert "Cannot open input" in capsys.readouterr().err

    def test_unwritable_output(self, source, tmp_path, capsys) -> None:
        code = main([str(source), str(tmp_path / "missing-dir" / "out.txt")])
        assert code == EXIT_OUTPUT_UNAVAILABLE
        assert "Cannot open output" in capsys.readouterr().err

    def test_failure_partway(self, tmp_path, capsys) -> None:
        source = tmp_path / "in.txt"
        source.write_bytes(b"fine text) then more")
        code = main([str(source), str(tmp_path / "out.txt"), "--unmatched-close", "error"])
        assert code == EXIT_FAILED
        assert "failed partway" in capsys.readouterr().err

    def test_options_forwarded(self, tmp_path) -> None:
        source = tmp_path / "in.txt"
        target = tmp_path / "out.txt"
        source.write_bytes(b"a(b(c)d)e")
        assert main([str(source), str(target), "--nesting", "flat", "--chunk-size", "1"]) == 0
        assert target.read_bytes() == b"ab^1^2e\n\nFN-1:c\n\nFN-2:d\n\n"

    def test_unterminated_option(self, tmp_path) -> None:
        source = tmp_path / "in.txt"
        target = tmp_path / "out.txt"
        source.write_bytes(b"a(b")
        assert main([str(source), str(target), "--unterminated", "drop"]) == EXIT_OK
        assert target.read_bytes() == b"a"

    def test_append_option(self, source, tmp_path) -> None:
        target = tmp_path / "out.txt"
        target.write_bytes(b">")
        assert main([str(source), str(target), "--append"]) == EXIT_OK
        assert target.read_bytes().startswith(b">Hello^1")

    def test_output_same_as_input(self, source, capsys) -> None:
        """The input is left intact when asked to overwrite itself."""
        assert main([str(source), str(source)]) == EXIT_OUTPUT_UNAVAILABLE
        assert "same file as input" in capsys.readouterr().err
        assert source.read_bytes() == b"Hello(world)#"

    @pytest.mark.skipif(not os.path.exists("/dev/full"), reason="needs /dev/full")
    def test_full_device(self, source, capsys) -> None:
        """A write that fails on the final flush still maps to exit 5."""
        assert main([str(source), "/dev/full"]) == EXIT_FAILED
        assert "failed partway" in capsys.readouterr().err

    @pytest.mark.skipif(not os.path.exists("/dev/full"), reason="needs /dev/full")
    def test_sink_errors_log(self, source, caplog) -> None:
        assert main([str(source), "/dev/full", "--sink-errors", "log"]) == EXIT_OK
        assert "Output flush failed" in caplog.text


class TestArgumentParsing:
    """argparse validation."""

    def test_requires_two_paths(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["only-one"])
        assert exc_info.value.code == 2

    @pytest.mark.parametrize("value", ["0", "-5", "ten"])
    def test_rejects_bad_chunk_size(self, value: str) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["in", "out", "--chunk-size", value])

    def test_rejects_unknown_policy(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["in", "out", "--nesting", "deep"])

    def test_defaults(self) -> None:
        args = build_parser().parse_args(["in", "out"])
        assert args.chunk_size == 100
        assert args.nesting == "nested"
        assert args.unmatched_close == "plain"
        assert args.unterminated == "footnote"
        assert args.sink_errors == "raise"
        assert args.append is False
