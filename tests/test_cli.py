"""Tests for the ppr command-line entry point."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from ppr import __version__
from ppr.cli import args_parser, main


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    logger = logging.getLogger("ppr")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.fixture
def source(tmp_path: Path) -> Path:
    path = tmp_path / "notes.ppr"
    path.write_text("T Notes\\H1 Intro\\P Hello **world**", encoding="utf-8")
    return path


class TestArgs:
    def test_input_is_required(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            args_parser().parse_args([])
        assert exc_info.value.code == 2

    def test_defaults(self) -> None:
        args = args_parser().parse_args(["-i", "a.ppr"])
        assert args.input == Path("a.ppr")
        assert args.output is None
        assert args.legacy_separator is False
        assert args.dump_json is False

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestMain:
    """Exit status and output files."""

    def test_writes_docx_next_to_input(self, source: Path) -> None:
        assert main(["-i", str(source)]) == 0
        assert source.with_suffix(".docx").is_file()

    def test_explicit_output(self, source: Path, tmp_path: Path) -> None:
        target = tmp_path / "out" / "report.docx"
        target.parent.mkdir()
        assert main(["-i", str(source), "-o", str(target)]) == 0
        assert target.is_file()

    def test_parse_failure_reports_and_writes_nothing(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "bad.ppr"
        path.write_text("P fine\\X broken", encoding="utf-8")

        assert main(["-i", str(path)]) == 1

        err = capsys.readouterr().err
        assert "UnrecognizedBlockMarker" in err
        assert "paragraph 1" in err
        assert not path.with_suffix(".docx").exists()

    def test_missing_input(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["-i", str(tmp_path / "absent.ppr")]) == 1
        assert "InputReadError" in capsys.readouterr().err

    def test_legacy_separator(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "legacy.ppr"
        path.write_text("T Old style\nP body text\n", encoding="utf-8")

        assert main(["-i", str(path), "--legacy-separator", "--dump-json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert [child["_type"] for child in data["children"]] == ["Title", "Paragraph"]

    def test_dump_json_writes_no_file(
        self, source: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["-i", str(source), "--dump-json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["_type"] == "Document"
        assert len(data["children"]) == 3
        assert not source.with_suffix(".docx").exists()

    def test_explicit_output_equal_to_input_is_refused(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "notes.ppr"
        path.write_text("P keep me", encoding="utf-8")

        assert main(["-i", str(path), "-o", str(path)]) == 1

        assert "ExportWriteError" in capsys.readouterr().err
        assert path.read_text(encoding="utf-8") == "P keep me"

    def test_verbose_enables_debug_logging(self, source: Path) -> None:
        assert main(["-i", str(source), "-v", "--dump-json"]) == 0
        assert logging.getLogger("ppr").level == logging.DEBUG
