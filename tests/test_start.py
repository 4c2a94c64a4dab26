"""Tests for the launcher script."""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from start import main  # noqa: E402
from towngraph.config import reset_config  # noqa: E402


def test_launcher_prints_towns_roads_and_path(tmp_path, capsys):
    roads = tmp_path / "roads.txt"
    roads.write_text(
        "Analytical Engine,3;Ada, Lovelace;Turing, Alan\n"
        "Bombe Lane,7;Turing, Alan;Hopper, Grace\n",
        encoding="utf-8",
    )

    code = main([str(roads), "--from", "Ada, Lovelace", "--to", "Hopper, Grace"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Turing, Alan" in out
    assert "Bombe Lane" in out
    assert "Ada, Lovelace via Analytical Engine to Turing, Alan 3 mi" in out
    assert "Turing, Alan via Bombe Lane to Hopper, Grace 7 mi" in out


def test_launcher_reports_no_path(tmp_path, capsys):
    roads = tmp_path / "roads.txt"
    roads.write_text("Main,1;A;B\nElm,1;C;D\n", encoding="utf-8")

    assert main([str(roads), "--from", "A", "--to", "D"]) == 0
    assert "No path found" in capsys.readouterr().out


def test_launcher_missing_file_fails(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "Failed to load roads" in capsys.readouterr().err


def test_launcher_default_file_comes_from_config(tmp_path, monkeypatch, capsys):
    (tmp_path / "roads.txt").write_text("Main,4;A;B\n", encoding="utf-8")
    monkeypatch.setenv("TOWNGRAPH_GRAPH_DATA_DIR", str(tmp_path))
    reset_config()
    try:
        assert main([]) == 0
    finally:
        reset_config()

    assert "Main" in capsys.readouterr().out
