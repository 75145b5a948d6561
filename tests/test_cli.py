import io
import sys

import pytest

from seabattle.cli import main, run
from seabattle.game import (
    Player,
    calculate_checksum,
    checksum_message,
    field_messages,
    init_field,
    shot_message,
)
from seabattle.link import Link


def play(data, player):
    out = io.BytesIO()
    link = Link(io.BytesIO(data), out)
    games = run(player, link)
    return games, out.getvalue().decode("latin-1")


def test_run_plays_opening_turns():
    data = b"HD_START\r\nHD_CS_1111111111\nHD_BOOM_5_5\nHD_BOOM_M\n"
    player = Player()
    games, text = play(data, player)
    expected = (
        "DH_START_LEO\n"
        + checksum_message(calculate_checksum(init_field()))
        + "DH_BOOM_H\n"
        + shot_message(0, 0)
    )
    assert games == 0
    assert text == expected
    assert player.opponent_field[0][0] == 2


def test_run_full_lost_game():
    field = init_field()
    cells = [(r, c) for r, row in enumerate(field) for c, v in enumerate(row) if v]
    lines = ["HD_START", "HD_CS_0000000000"]
    for index, (row, col) in enumerate(cells):
        lines.append(f"HD_BOOM_{row}_{col}")
        if index < len(cells) - 1:
            lines.append("HD_BOOM_M")
    data = ("\n".join(lines) + "\n").encode()
    games, text = play(data, Player(target_games=1))
    assert games == 1
    assert text.endswith("".join(field_messages(field)))
    assert text.count("DH_BOOM_H\n") == len(cells) - 1


def test_run_on_empty_input():
    games, text = play(b"", Player())
    assert (games, text) == (0, "")


def test_main_uses_stdio(monkeypatch):
    raw_out = io.BytesIO()
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"HD_START\n")))
    monkeypatch.setattr(sys, "stdout", io.TextIOWrapper(raw_out))
    assert main(["--name", "ANNA"]) == 0
    assert raw_out.getvalue() == b"DH_START_ANNA\n"


def test_main_rejects_zero_games():
    with pytest.raises(SystemExit) as info:
        main(["--games", "0"])
    assert info.value.code == 2