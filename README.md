# seabattle

A Battleship player that speaks a simple line-based protocol with a host.
It answers the host's start and checksum messages, reports hits and misses
on its own fleet, fires back using an edge-first, then checkerboard,
strategy, and sends its board when a game ends. It plays a series of games
and resets between them.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Running

```
seabattle [--name NAME] [--games N] [--max-len N]
```

The command reads host messages from standard input and writes its replies
to standard output, one message per line.

- `--name` – the name sent in `DH_START_<name>` (default `LEO`).
- `--games` – how many games to play before stopping (default `100`).
- `--max-len` – size of the line buffer including its terminator (default
  `32`); a line keeps at most `max-len - 1` characters, the rest is dropped.

It stops once the given number of games has been played or input ends.
After input ends, steps that need no input (such as firing its own shot)
are still carried out.

## The protocol

Messages from the host start with `HD_`, messages from the player with `DH_`.
Carriage returns are ignored; a newline ends a message.

| Host sends                | Player replies                                        |
|---------------------------|-------------------------------------------------------|
| `HD_START...`             | `DH_START_<name>`                                     |
| `HD_CS_...`               | `DH_CS_` followed by ten digits: ship cells per row   |
| `HD_BOOM_r_c`             | `DH_BOOM_H` or `DH_BOOM_M`, then its own shot `DH_BOOM_r_c` |
| `HD_BOOM_H` / `HD_BOOM_M` | nothing; the result of its last shot is recorded      |
| `HD_SF...`                | see below                                             |

A `HD_BOOM_r_c` message must be exactly eleven characters with coordinates
on the 10×10 field; other boom messages are ignored.

The game ends in one of two ways:

- When the host's shot hits the last of the fleet's thirty ship cells, the
  player sends no `DH_BOOM_H` and instead sends its board.
- When, while waiting for the result of its own shot, the player receives a
  `HD_SF` line, the game is over; on the next `HD_SF` line it sends its
  board.

The board is ten lines `DH_SF<r>D<cells>`, one per row, each cell a digit:
`0` for water, otherwise the length of the ship on it, as placed at the
start of the game. The player then starts the next game, unless the target
number of games has been reached.

## Using it as a library

```python
from seabattle.game import Player

player = Player("LEO", 100)
for reply in player.step("HD_START"):
    print(reply, end="")
```

`seabattle.game` also offers the pieces the player is built from:
`Ship`, `GameState`, `init_field`, `can_place_ship`, `place_ship`,
`is_valid_position`, `calculate_checksum`, `checksum_message`,
`parse_boom_message` (raises `ValueError` on a malformed message),
`next_shot` (returns `None` when every cell has been tried), `shot_message`
and `field_messages`.

`seabattle.fifo.Fifo` is a fixed-size byte ring buffer (64 slots by
default, holding one byte fewer); `put` raises `FifoFullError` and `get`
raises `FifoEmptyError`.

`seabattle.link` turns bytes into lines: `LineReader` assembles them one
byte at a time, and `Link` queues received bytes (`receive`), reads whole
lines (`read_line`) or one byte at a time (`poll_line`), and writes text
(`write`) to a binary stream.

`seabattle.cli.run(player, link)` drives a `Player` from a `Link` and
returns the number of games played.

## What it does not do

The fleet layout is fixed and the same in every game. The player does not
open serial ports or network connections itself; it only talks through
the streams it is given, standard input and output for the command.