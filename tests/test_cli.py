"""End-to-end tests for the command-line driver."""

import io

import pytest
from hexlife.cli import main, run_simulation
from hexlife.config import SimulationConfig
from hexlife.core.board import Board
from hexlife.core.topology import Topology

BLINKER = ".....\n.....\n.XXX.\n.....\n.....\n"


@pytest.fixture
def blinker_file(tmp_path):
    path = tmp_path / "blinker.txt"
    path.write_text(BLINKER)
    return path


def test_prints_every_generation(blinker_file):
    out = io.StringIO()
    code = main(["-8", "-f", str(blinker_file), "-g", "2"], out=out)

    assert code == 0
    lines = out.getvalue().splitlines()
    assert lines == [
        "Gen 0", ".....", ".....", ".XXX.", ".....", ".....",
        "Gen 1", ".....", "..X..", "..X..", "..X..", ".....",
        "Gen 2", ".....", ".....", ".XXX.", ".....", ".....",
    ]


def test_print_interval(blinker_file):
    out = io.StringIO()
    main(["-8", "-f", str(blinker_file), "-g", "4", "-p", "2"], out=out)

    headers = [line for line in out.getvalue().splitlines() if line.startswith("Gen")]
    assert headers == ["Gen 0", "Gen 2", "Gen 4"]


def test_hex_rendering_from_random_board():
    out = io.StringIO()
    code = main(["-6", "-size", "4", "-i", "1", "-g", "0"], out=out)

    assert code == 0
    assert out.getvalue().splitlines() == [
        "Gen 0",
        "X X X X",
        " X X X X",
        "X X X X",
        " X X X X",
    ]


def test_seeded_runs_match():
    first, second = io.StringIO(), io.StringIO()
    main(["-12", "-size", "8", "-seed", "3", "-g", "3"], out=first)
    main(["-12", "-size", "8", "-seed", "3", "-g", "3"], out=second)
    assert first.getvalue() == second.getvalue()


def test_invalid_flags_exit_with_error(caplog):
    out = io.StringIO()
    code = main(["-size", "zero", "-p", "0"], out=out)

    assert code == 1
    assert out.getvalue() == ""
    assert "-size" in caplog.text
    assert "-p" in caplog.text


def test_bad_board_file_exits_with_error(tmp_path, caplog):
    path = tmp_path / "bad.txt"
    path.write_text("X.\nXO\n")

    code = main(["-f", str(path)], out=io.StringIO())

    assert code == 1
    assert "Cannot build board" in caplog.text


def test_missing_board_file_exits_with_error(tmp_path):
    assert main(["-f", str(tmp_path / "nope.txt")], out=io.StringIO()) == 1


def test_run_simulation_updates_board():
    board = Board.from_lines(BLINKER.splitlines(), Topology.SQUARE8)
    run_simulation(board, SimulationConfig(generations=1), io.StringIO())
    # Generations 0 and 1 are printed, then the board advances past the last print
    assert board.generation == 2


def test_non_ascii_board_file_exits_with_error(tmp_path, caplog):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"X\xff\n..\n")

    assert main(["-f", str(path)], out=io.StringIO()) == 1
    assert "Cannot build board" in caplog.text


def test_negative_generations_exit_with_error(caplog):
    out = io.StringIO()
    assert main(["-8", "-g", "-1"], out=out) == 1
    assert out.getvalue() == ""
    assert "-g" in caplog.text


def test_unknown_flag_exits_with_error():
    assert main(["-bogus"], out=io.StringIO()) == 1
