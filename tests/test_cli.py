import pytest

from picross.io.cli import main


def test_cli_solves_mega(puzzle_path, capsys):
    assert main([str(puzzle_path("mega_5x5"))]) == 0
    out = capsys.readouterr().out
    assert "mega puzzle 'mega-5x5': 5x5" in out
    assert "#####" in out
    assert "Trace:" in out


def test_cli_small_trace_cap(puzzle_path, capsys):
    assert main([str(puzzle_path("mega_5x5")), "--max-trace", "10"]) == 0
    assert "Trace: 60 events (truncated" in capsys.readouterr().out


def test_cli_no_trace(puzzle_path, capsys):
    assert main([str(puzzle_path("mega_5x5")), "--no-trace"]) == 0
    assert "Trace:" not in capsys.readouterr().out


def test_cli_no_solution(tmp_path, capsys):
    path = tmp_path / "impossible.yaml"
    path.write_text("rows:\n  - [2, 2]\ncolumns:\n  - [1]\n  - [1]\n  - [1]\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "No solution found." in capsys.readouterr().out


def test_cli_missing_file(tmp_path):
    with pytest.raises(SystemExit):
        main([str(tmp_path / "missing.yaml")])


def test_cli_no_trace_reports_board_steps(puzzle_path, capsys):
    assert main([str(puzzle_path("mega_5x5")), "--no-trace"]) == 0
    assert "Playback steps: 25" in capsys.readouterr().out
