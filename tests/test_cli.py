"""Tests for the adjgraph command."""

from argparse import ArgumentTypeError
from pathlib import Path

import pytest

from adjgraph.cli import edge, main


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty working directory with no config file above it."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("adjgraph.cli.find_config", lambda: None)
    return tmp_path


class TestEdgeArgument:
    def test_parses_pair(self) -> None:
        assert edge("3:4") == (3, 4)

    @pytest.mark.parametrize("text", ["3", "3:4:5", "a:1", ""])
    def test_rejects_malformed(self, text: str) -> None:
        with pytest.raises(ArgumentTypeError, match="expected SRC:DST"):
            edge(text)


class TestCount:
    def test_fully_connected(self, workdir: Path, capsys: pytest.CaptureFixture) -> None:
        main(["count", "-n", "4", "--fully-connect"])
        assert capsys.readouterr().out == "vertices: 4\nedges: 16\n"

    def test_delete_keeps_dangling_edges(
        self, workdir: Path, capsys: pytest.CaptureFixture
    ) -> None:
        main(["count", "-n", "3", "-f", "-d", "0", "-d", "1"])
        assert capsys.readouterr().out == "vertices: 1\nedges: 3\n"

    def test_empty(self, workdir: Path, capsys: pytest.CaptureFixture) -> None:
        main(["count"])
        assert capsys.readouterr().out == "vertices: 0\nedges: 0\n"


class TestShow:
    def test_edges(self, workdir: Path, capsys: pytest.CaptureFixture) -> None:
        main(["show", "-n", "2", "-e", "0:1", "-e", "1:1"])
        assert capsys.readouterr().out == (
            "|vertex 0| edges: [1]\n"
            "|vertex 1| edges: [1]\n"
        )

    def test_config_file(self, workdir: Path, capsys: pytest.CaptureFixture) -> None:
        config = workdir / "graph.yml"
        config.write_text(
            "name: demo\nvertices: 3\nedges:\n  - [0, 2]\ndelete: [1]\n"
        )
        main(["show", "-c", str(config), "-e", "2:0"])
        assert capsys.readouterr().out == (
            "|vertex 0| edges: [2]\n"
            "|vertex 2| edges: [0]\n"
        )

    def test_options_override_config(
        self, workdir: Path, capsys: pytest.CaptureFixture
    ) -> None:
        config = workdir / "graph.yml"
        config.write_text("name: demo\nvertices: 5\n")
        main(["count", "-c", str(config), "-n", "2", "-f"])
        assert capsys.readouterr().out == "vertices: 2\nedges: 4\n"

    def test_found_config(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        (tmp_path / "adjgraph.yml").write_text("name: found\nvertices: 1\n")
        monkeypatch.chdir(tmp_path)
        main(["show"])
        assert capsys.readouterr().out == "|vertex 0| edges: []\n"


class TestErrors:
    def test_unissued_source_is_fatal(
        self, workdir: Path, capsys: pytest.CaptureFixture
    ) -> None:
        with pytest.raises(SystemExit) as info:
            main(["count", "-n", "2", "-e", "5:0"])
        assert info.value.code == 1
        err = capsys.readouterr().err
        assert "FATAL: no adjacency slot for vertex 5" in err

    def test_unissued_delete_is_fatal(self, workdir: Path) -> None:
        with pytest.raises(SystemExit) as info:
            main(["count", "-n", "2", "-d", "9"])
        assert info.value.code == 1

    def test_bad_edge_syntax(self, workdir: Path, capsys: pytest.CaptureFixture) -> None:
        with pytest.raises(SystemExit) as info:
            main(["show", "-e", "1-2"])
        assert info.value.code == 2
        assert "expected SRC:DST" in capsys.readouterr().err

    def test_bad_config_exits(self, workdir: Path, capsys: pytest.CaptureFixture) -> None:
        config = workdir / "graph.yml"
        config.write_text("name: demo\nvertices: lots\n")
        with pytest.raises(SystemExit) as info:
            main(["count", "-c", str(config)])
        assert info.value.code == 1
        assert "'vertices' must be" in capsys.readouterr().err

    def test_keep_going_uses_defaults(
        self, workdir: Path, capsys: pytest.CaptureFixture
    ) -> None:
        config = workdir / "graph.yml"
        config.write_text("name: demo\nvertices: lots\n")
        main(["count", "-k", "-c", str(config)])
        captured = capsys.readouterr()
        assert captured.out == "vertices: 0\nedges: 0\n"
        assert "ERROR:" in captured.err

    def test_missing_config_file(self, workdir: Path, capsys: pytest.CaptureFixture) -> None:
        with pytest.raises(SystemExit):
            main(["count", "-c", str(workdir / "nope.yml")])
        assert "cannot read" in capsys.readouterr().err


class TestHelp:
    def test_help(self, capsys: pytest.CaptureFixture) -> None:
        main(["help"])
        assert "usage: adjgraph" in capsys.readouterr().out

    def test_help_command(self, capsys: pytest.CaptureFixture) -> None:
        main(["help", "show"])
        assert "--fully-connect" in capsys.readouterr().out
