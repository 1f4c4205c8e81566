"""Tests for the command line entry point."""
import json

import pytest

import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("ARC2HTML_INPUT", "ARC2HTML_OUTPUT", "ARC2HTML_VERBOSE"):
        monkeypatch.delenv(name, raising=False)


class TestMain:
    def test_converts_file(self, sidebar_path, tmp_path, capsys):
        output = tmp_path / "bookmarks.html"
        assert main.main([str(sidebar_path), "-o", str(output)]) == 0
        assert output.exists()
        out = capsys.readouterr().out
        assert "Bookmarks: 5" in out
        assert "Folders: 3" in out

    def test_output_from_env(self, sidebar_path, tmp_path, monkeypatch):
        output = tmp_path / "env.html"
        monkeypatch.setenv("ARC2HTML_INPUT", str(sidebar_path))
        monkeypatch.setenv("ARC2HTML_OUTPUT", str(output))
        assert main.main([]) == 0
        assert output.exists()

    def test_tree_option(self, sidebar_path, tmp_path):
        tree = tmp_path / "tree.json"
        main.main([str(sidebar_path), "-o", str(tmp_path / "b.html"), "--tree", str(tree)])
        assert json.loads(tree.read_text(encoding="utf-8"))[1]["title"] == "Default Space"

    def test_invalid_input_returns_error(self, tmp_path, capsys):
        bad = tmp_path / "StorableSidebar.json"
        bad.write_text("{", encoding="utf-8")
        output = tmp_path / "bookmarks.html"
        assert main.main([str(bad), "-o", str(output)]) == 1
        assert not output.exists()
        assert "Error:" in capsys.readouterr().err

    def test_unreadable_input_returns_error(self, tmp_path, capsys):
        output = tmp_path / "bookmarks.html"
        assert main.main([str(tmp_path), "-o", str(output)]) == 1
        assert not output.exists()
        assert "Cannot read" in capsys.readouterr().err

    def test_verbose_and_quiet_are_exclusive(self):
        with pytest.raises(SystemExit):
            main.build_parser().parse_args(["-v", "-q"])
