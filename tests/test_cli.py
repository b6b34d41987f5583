"""Tests for plume.cli — CLI entrypoint, argument parsing, and commands."""

import hashlib

import pytest

from plume.cli import main


class TestCLIHelp:
    @pytest.mark.parametrize("argv", [["--help"], ["render", "--help"], ["urls", "--help"], ["parse", "--help"]])
    def test_help_exits_zero(self, argv: list[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_render_missing_values(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["render", "~/{Path}/{Name}.{Ext}.v{Version}"])
        assert exc_info.value.code == 2

    def test_urls_missing_files(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["urls"])
        assert exc_info.value.code == 2

    def test_parse_missing_path(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["parse"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "plume" in captured.out


class TestRender:
    def test_prints_rendered_url(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(
            [
                "render",
                "~/{Version}.{Name}.{Ext}.{Path}",
                "--path=abc",
                "--name=hello",
                "--ext=.js",
                "--version=123",
            ]
        )
        assert capsys.readouterr().out.strip() == "~/123.hello.js.abc"

    def test_invalid_template(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["render", "~/{Path}{Name}.{Ext}.v{Version}", "--path=a", "--name=b", "--ext=.js", "--version=1"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err


class TestUrls:
    def test_prints_url_and_key(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["urls", "Test1.js", "Test2.js", "--path", "sg"])
        key = hashlib.sha1(b"Test1.Test2").hexdigest()
        assert capsys.readouterr().out.strip() == f"/sg/Test1.Test2.js.v1  {key}"

    def test_splits(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["urls", "Test1.js", "Test2.js", "--path", "sg", "--max-url-length", "24"])
        lines = capsys.readouterr().out.strip().splitlines()
        assert [line.split()[0] for line in lines] == ["/sg/Test1.js.v1", "/sg/Test2.js.v1"]

    def test_stylesheets(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["urls", "a.css", "b.css", "--ext", ".css", "--version", "9"])
        assert capsys.readouterr().out.startswith("/sc/a.b.css.v9  ")

    def test_too_long(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["urls", "Test1.js", "--max-url-length", "10"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_invalid_limit(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["urls", "Test1.js", "--max-url-length", "0"])
        assert exc_info.value.code == 1
        assert "max_url_length" in capsys.readouterr().err


class TestParse:
    def test_prints_parts(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["parse", "c61531b5.2512be3b.js.v1"])
        out = capsys.readouterr().out
        assert "version: 1" in out
        assert "type:    js" in out
        assert "  c61531b5" in out
        assert "  2512be3b" in out

    def test_root_relative(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["parse", "/sg/a.b.css.v2", "--path-prefix", "sg"])
        out = capsys.readouterr().out
        assert "type:    css" in out

    def test_unparseable(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["parse", "favicon.ico"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_custom_template(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["parse", "/sg/v7/a.b.css", "--path-prefix", "sg", "--template", "~/{Path}/v{Version}/{Name}.{Ext}"])
        out = capsys.readouterr().out
        assert "version: 7" in out
        assert "  a" in out

    def test_dotted_name_decoded(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["parse", "jquery%2Emin.app.js.v1"])
        out = capsys.readouterr().out
        assert "  jquery.min" in out
        assert "  app" in out

    def test_rejects_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["parse", "a.js.v1", "--version", "2"])
        assert exc_info.value.code == 2
