"""Tests for the titlecaps command-line interface.

WHY: The CLI is how most headings get converted in practice (shell
pipelines, editor filters). Argument handling, wordlist merging and exit
codes must behave predictably.

HOW: main() is called with an explicit argv. stdout/stderr are captured
with capsys; stdin and config defaults are patched with monkeypatch.

RULES:
- All file I/O tests use tmp_path fixtures for isolation.
- Error paths must exit with code 1 and print "Error:" to stderr.
"""

import io

import pytest

from titlecaps import __version__, config
from titlecaps.cli import build_parser, main


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.text == []
        assert args.input_file is None
        assert args.output_file is None
        assert args.wordlist is None
        assert args.boundary_forcing is True
        assert args.verbose is False

    def test_boundary_forcing_default_from_config(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_BOUNDARY_FORCING", False)
        assert build_parser().parse_args([]).boundary_forcing is False

    def test_repeatable_wordlist(self):
        args = build_parser().parse_args(["-w", "a.txt", "-w", "b.txt"])
        assert args.wordlist == ["a.txt", "b.txt"]


class TestMain:

    def test_positional_text(self, capsys):
        main(["a", "tale", "of", "two", "cities"])
        assert capsys.readouterr().out == "A Tale of Two Cities\n"

    def test_no_boundary_forcing(self, capsys):
        main(["--no-boundary-forcing", "the", "who"])
        assert capsys.readouterr().out == "the Who\n"

    def test_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("the end\nof it\n"))
        main([])
        assert capsys.readouterr().out == "The End\nOf It\n"

    def test_input_and_output_files(self, capsys, tmp_path):
        src = tmp_path / "in.txt"
        src.write_text("a tale\nof two\n", encoding="utf-8")
        dst = tmp_path / "out.txt"

        main(["-f", str(src), "-o", str(dst)])

        assert dst.read_text(encoding="utf-8") == "A Tale\nOf Two\n"
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Wrote" in captured.err

    def test_wordlist(self, capsys, wordlist_file):
        main(["-w", str(wordlist_file), "nasa", "launch"])
        assert capsys.readouterr().out == "NASA Launch\n"

    def test_wordlists_merged(self, capsys, tmp_path, wordlist_file):
        extra = tmp_path / "extra.txt"
        extra.write_text("PostgreSQL\n", encoding="utf-8")
        main(["-w", str(wordlist_file), "-w", str(extra), "nasa", "on", "postgresql"])
        assert capsys.readouterr().out == "NASA on PostgreSQL\n"

    def test_default_wordlist_from_config(self, capsys, monkeypatch, wordlist_file):
        monkeypatch.setattr(config, "DEFAULT_WORDLIST", str(wordlist_file))
        main(["nasa", "launch"])
        assert capsys.readouterr().out == "NASA Launch\n"

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestErrors:

    def test_missing_input_file(self, capsys, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(["-f", str(tmp_path / "missing.txt")])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_missing_wordlist(self, capsys, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(["-w", str(tmp_path / "missing.txt"), "nasa"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err
