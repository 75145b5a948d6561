"""Battleship player: field setup, shot strategy, wire messages and turn logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Iterator, Sequence

FIELD_SZ = 10
DEVICE_NAME = "LEO"
DEFAULT_TARGET_GAMES = 100

Field = list[list[int]]

_HIT_MARK = 1
_MISS_MARK = 2


@dataclass(frozen=True)
class Ship:
    """A ship given by its first cell, its length and its orientation."""

    row: int
    col: int
    length: int
    horizontal: bool

    def cells(self) -> Iterator[tuple[int, int]]:
        """Yield the (row, col) cells the ship covers."""
        for offset in range(self.length):
            if self.horizontal:
                yield self.row, self.col + offset
            else:
                yield self.row + offset, self.col


DEFAULT_SHIPS: tuple[Ship, ...] = (
    Ship(0, 0, 5, True),
    Ship(2, 0, 4, False),
    Ship(1, 9, 4, False),
    Ship(5, 3, 3, True),
    Ship(2, 7, 3, False),
    Ship(7, 5, 3, True),
    Ship(0, 6, 2, True),
    Ship(7, 0, 2, False),
    Ship(6, 9, 2, False),
    Ship(9, 5, 2, True),
)

# Hits needed to sink the whole default fleet.
TOTAL_SHIP_CELLS = sum(ship.length for ship in DEFAULT_SHIPS)


class GameState(Enum):
    WAITING_START = auto()
    WAITING_CS = auto()
    MY_TURN = auto()
    WAITING_FOR_RESPONSE = auto()
    OP_TURN = auto()
    GAME_OVER = auto()


def _empty_field() -> Field:
    return [[0] * FIELD_SZ for _ in range(FIELD_SZ)]


def _digit(value: int) -> str:
    return chr(ord("0") + value)


def is_valid_position(row: int, col: int) -> bool:
    """Return True when (row, col) lies on the field."""
    return 0 <= row < FIELD_SZ and 0 <= col < FIELD_SZ


def can_place_ship(field: Sequence[Sequence[int]], ship: Ship) -> bool:
    """Return True when every cell of ``ship`` is on the field and empty."""
    return all(
        is_valid_position(row, col) and field[row][col] == 0
        for row, col in ship.cells()
    )


def place_ship(field: Field, ship: Ship) -> None:
    """Mark the ship's cells in ``field`` with its length."""
    for row, col in ship.cells():
        field[row][col] = ship.length


def init_field(ships: Iterable[Ship] = DEFAULT_SHIPS) -> Field:
    """Return a new field holding every ship that fits; others are skipped."""
    field = _empty_field()
    for ship in ships:
        if can_place_ship(field, ship):
            place_ship(field, ship)
    return field


def calculate_checksum(field: Sequence[Sequence[int]]) -> list[int]:
    """Return the number of ship cells in each row."""
    return [sum(1 for cell in row if cell > 0) for row in field]


def checksum_message(checksum: Iterable[int]) -> str:
    """Build the ``DH_CS_`` message for a row checksum."""
    return "DH_CS_" + "".join(_digit(value) for value in checksum) + "\n"


def parse_boom_message(message: str) -> tuple[int, int]:
    """Extract (row, col) from ``HD_BOOM_r_c``; raise ValueError if malformed."""
    if len(message) != 11:
        raise ValueError(f"boom message has wrong length: {message!r}")
    if not message.startswith("HD_BOOM_"):
        raise ValueError(f"not a boom message: {message!r}")
    row = ord(message[8]) - ord("0")
    col = ord(message[10]) - ord("0")
    if not is_valid_position(row, col):
        raise ValueError(f"boom coordinates off the field: {message!r}")
    return row, col


def _shot_order() -> Iterator[tuple[int, int]]:
    last = FIELD_SZ - 1
    yield from ((0, c) for c in range(FIELD_SZ))
    yield from ((last, c) for c in range(FIELD_SZ))
    yield from ((r, 0) for r in range(FIELD_SZ))
    yield from ((r, last) for r in range(FIELD_SZ))
    cells = [(r, c) for r in range(FIELD_SZ) for c in range(FIELD_SZ)]
    yield from ((r, c) for r, c in cells if (r + c) % 2 == 0)
    yield from cells


def next_shot(field: Sequence[Sequence[int]]) -> tuple[int, int] | None:
    """Pick the next untried cell: border first, then a checkerboard, then the rest.

    Returns None when every cell has been tried.
    """
    return next(((r, c) for r, c in _shot_order() if field[r][c] == 0), None)


def shot_message(row: int, col: int) -> str:
    """Build the ``DH_BOOM_`` message for a shot at (row, col)."""
    return f"DH_BOOM_{_digit(row)}_{_digit(col)}\n"


def field_messages(field: Sequence[Sequence[int]]) -> list[str]:
    """Build the ``DH_SF`` lines that reveal ``field`` row by row."""
    return [
        f"DH_SF{_digit(r)}D" + "".join(_digit(cell) for cell in row) + "\n"
        for r, row in enumerate(field)
    ]


class Player:
    """The device side of a series of games, driven one step at a time."""

    def __init__(
        self, name: str = DEVICE_NAME, target_games: int = DEFAULT_TARGET_GAMES
    ) -> None:
        self.name = name
        self.target_games = target_games
        self.games_played = 0
        self.reset()

    def reset(self) -> None:
        """Set up a fresh game: new fleet, cleared opponent field, initial state."""
        self.field = init_field()
        self.original_field = [row[:] for row in self.field]
        self.checksum = calculate_checksum(self.field)
        self.opponent_field = _empty_field()
        self.hit_count = 0
        self.last_shot: tuple[int, int] | None = None
        self.state = GameState.WAITING_START

    def process_shot(self, row: int, col: int) -> bool:
        """Apply an opponent shot; return True when it hit a ship cell."""
        if self.field[row][col] > 0:
            self.field[row][col] = 0
            self.hit_count += 1
            return True
        return False

    def finished(self) -> bool:
        """Return True once the target number of games has been played."""
        return self.games_played >= self.target_games

    def step(self, line: str | None) -> list[str]:
        """Advance by one step given a received line (or None); return messages to send.

        Once the target number of games has been played nothing more is sent.
        """
        if self.finished():
            return []
        handler = {
            GameState.WAITING_START: self._on_waiting_start,
            GameState.WAITING_CS: self._on_waiting_cs,
            GameState.OP_TURN: self._on_op_turn,
            GameState.MY_TURN: self._on_my_turn,
            GameState.WAITING_FOR_RESPONSE: self._on_waiting_for_response,
            GameState.GAME_OVER: self._on_game_over,
        }[self.state]
        return handler(line or "")

    def _on_waiting_start(self, line: str) -> list[str]:
        if line.startswith("HD_START"):
            self.state = GameState.WAITING_CS
            return [f"DH_START_{self.name}\n"]
        return []

    def _on_waiting_cs(self, line: str) -> list[str]:
        if line.startswith("HD_CS_"):
            self.state = GameState.OP_TURN
            return [checksum_message(self.checksum)]
        return []

    def _on_op_turn(self, line: str) -> list[str]:
        if not line.startswith("HD_BOOM_"):
            return []
        try:
            row, col = parse_boom_message(line)
        except ValueError:
            return []
        out = []
        if self.process_shot(row, col):
            if self.hit_count != TOTAL_SHIP_CELLS:
                out.append("DH_BOOM_H\n")
        else:
            out.append("DH_BOOM_M\n")
        if self.hit_count == TOTAL_SHIP_CELLS:
            self.state = GameState.GAME_OVER
        else:
            self.state = GameState.MY_TURN
        return out

    def _on_my_turn(self, line: str) -> list[str]:
        shot = next_shot(self.opponent_field)
        self.state = GameState.WAITING_FOR_RESPONSE
        if shot is None:
            return []
        self.last_shot = shot
        return [shot_message(*shot)]

    def _mark_last_shot(self, mark: int) -> None:
        if self.last_shot is not None:
            row, col = self.last_shot
            self.opponent_field[row][col] = mark

    def _on_waiting_for_response(self, line: str) -> list[str]:
        if line.startswith("HD_BOOM_H"):
            self._mark_last_shot(_HIT_MARK)
            self.state = GameState.OP_TURN
        elif line.startswith("HD_BOOM_M"):
            self._mark_last_shot(_MISS_MARK)
            self.state = GameState.OP_TURN
        elif line.startswith("HD_SF"):
            self.state = GameState.GAME_OVER
        return []

    def _on_game_over(self, line: str) -> list[str]:
        if self.hit_count == TOTAL_SHIP_CELLS or line.startswith("HD_SF"):
            out = field_messages(self.original_field)
            self.games_played += 1
            if self.games_played < self.target_games:
                self.reset()
            return out
        return []