"""Command that plays games over standard input and output."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .game import DEFAULT_TARGET_GAMES, DEVICE_NAME, Player
from .link import DEFAULT_MAX_LEN, Link


def _send(link: Link, messages: list[str]) -> None:
    for message in messages:
        link.write(message)


def run(player: Player, link: Link) -> int:
    """Drive ``player`` from ``link`` until its games are done or input ends.

    After input ends, steps that need no input are still carried out.
    Returns the number of games played.
    """
    while not player.finished():
        try:
            line = link.poll_line()
        except EOFError:
            break
        _send(link, player.step(line))
    while not player.finished():
        before = player.state
        out = player.step(None)
        _send(link, out)
        if not out and player.state == before:
            break
    return player.games_played


def _positive(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="seabattle", description="Play battleship games over standard I/O."
    )
    parser.add_argument("--name", default=DEVICE_NAME, help="player name")
    parser.add_argument(
        "--games", type=_positive, default=DEFAULT_TARGET_GAMES,
        help="number of games to play",
    )
    parser.add_argument(
        "--max-len", type=_positive, default=DEFAULT_MAX_LEN,
        help="longest line buffer, including terminator",
    )
    args = parser.parse_args(argv)
    link = Link(sys.stdin.buffer, sys.stdout.buffer, args.max_len)
    run(Player(args.name, args.games), link)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())