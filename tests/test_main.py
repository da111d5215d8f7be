import csv
import sys

from snek.config import Config
from snek.game import new_game_state
from snek.main import main, run


def test_idle_snake_dies_at_the_top_wall():
    # from y=6 heading up, the 14th move leaves a 20-high grid
    state = new_game_state(Config())
    rows = run(state, ticks=300, delta_ms=200, policy="idle")

    finished, last = rows[:-1], rows[-1]
    assert len(finished) == 21
    assert [r[0] for r in finished] == list(range(1, 22))
    assert all(r[1] == 14 for r in finished)
    assert last == (22, 6, last[2], last[3])


def test_cli_writes_csv(tmp_path, monkeypatch, capsys):
    out = tmp_path / "runs" / "idle.csv"
    monkeypatch.setattr(
        sys, "argv",
        ["snek-run", "--ticks", "100", "--delta-ms", "200", "--policy", "idle", "--out", str(out)],
    )
    main()

    printed = capsys.readouterr().out
    assert "game,ticks,length,food" in printed
    with open(out, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["game", "ticks", "length", "food"]
    assert rows[1][:2] == ["1", "14"]


def test_cli_dumps_final_board(monkeypatch, capsys):
    monkeypatch.setattr(
        sys, "argv",
        ["snek-run", "--ticks", "1", "--delta-ms", "1", "--policy", "idle", "--dump-board"],
    )
    main()

    lines = capsys.readouterr().out.splitlines()
    board = lines[-20:]
    assert all(len(row) == 20 for row in board)
    assert board[19 - 6][10] == "@"
    assert board[19 - 5][10] == "o"
