"""Boards for the naval battle game: ship positions, attacks and display."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path

from gridgames.text import spaced

SIZE = 8
EMPTY = "."
HIT = "x"
MISS = "o"
COLUMNS = "ABCDEFGH"
SHIP_COUNT = 4

Grid = list[list[str]]


class Status(IntEnum):
    """Values exchanged between players after an attack."""

    NONE = 0
    HIT = 20
    MISSED = 21
    WIN = 22
    NOT = 254
    OK = 255


class PositionError(ValueError):
    """Raised when a positions file does not describe valid ships."""


@dataclass(frozen=True)
class Ship:
    """A ship of ``length`` cells from (x1, y1) to (x2, y2), zero-based."""

    length: int
    x1: int
    y1: int
    x2: int
    y2: int

    @property
    def vertical(self) -> bool:
        """A ship whose ends share a column lies vertically."""
        return self.x1 == self.x2

    def cells(self) -> list[tuple[int, int]]:
        """Return the (x, y) cells the ship covers on the board."""
        if self.vertical:
            return [(self.x1, y) for y in range(SIZE) if self.y1 <= y <= self.y2]
        return [(x, self.y1) for x in range(SIZE) if self.x1 <= x <= self.x2]


def _parse_line(line: str, number: int) -> Ship:
    if len(line) < 7:
        raise PositionError(f"line {number}: too short")
    length, col1, row1, col2, row2 = line[0], line[2], line[3], line[5], line[6]
    if not "2" <= length <= "5":
        raise PositionError(f"line {number}: bad ship length {length!r}")
    if col1 not in COLUMNS or col2 not in COLUMNS:
        raise PositionError(f"line {number}: column out of range")
    if not ("1" <= row1 <= "8" and "1" <= row2 <= "8"):
        raise PositionError(f"line {number}: row out of range")
    if col1 == col2 and row1 == row2:
        raise PositionError(f"line {number}: ship starts and ends on one cell")
    return Ship(
        length=int(length),
        x1=COLUMNS.index(col1),
        y1=int(row1) - 1,
        x2=COLUMNS.index(col2),
        y2=int(row2) - 1,
    )


def parse_positions(text: str) -> list[Ship]:
    """Parse four lines of the form ``L:C1:C2`` into ships."""
    lines = text.splitlines()
    if len(lines) < SHIP_COUNT:
        raise PositionError(f"expected {SHIP_COUNT} ships, found {len(lines)}")
    return [_parse_line(line, number) for number, line in enumerate(lines[:SHIP_COUNT], 1)]


def load_positions(path: str | Path) -> list[Ship]:
    """Read and parse the positions file at ``path``."""
    with open(path, encoding="latin-1") as stream:
        return parse_positions(stream.read())


def empty_grid() -> Grid:
    """Return an 8 by 8 grid of empty cells."""
    return [[EMPTY] * SIZE for _ in range(SIZE)]


def place_ships(ships: list[Ship]) -> Grid:
    """Return a grid with each ship's cells marked by its length."""
    grid = empty_grid()
    for ship in ships:
        for x, y in ship.cells():
            grid[y][x] = str(ship.length)
    return grid


def format_grid(title: str, grid: Grid) -> str:
    """Render a grid under a title with lettered columns and numbered rows."""
    lines = [f"{title}:", " |" + " ".join(COLUMNS), "-+" + "-" * (2 * SIZE - 1)]
    lines.extend(f"{number}|{spaced(''.join(row))}" for number, row in enumerate(grid, 1))
    return "\n".join(lines) + "\n\n"


def _is_ship(cell: str) -> bool:
    return "2" <= cell <= "5"


@dataclass
class Board:
    """A player's own grid and what is known of the enemy's."""

    my_grid: Grid
    enemy_grid: Grid = field(default_factory=empty_grid)

    @classmethod
    def from_file(cls, path: str | Path) -> Board:
        """Build a board from a positions file."""
        return cls(my_grid=place_ships(load_positions(path)))

    def attack(self, x: int, y: int) -> Status:
        """Apply an enemy shot at (x, y) to the own grid and report it."""
        cell = self.my_grid[y][x]
        status = Status.NONE
        if _is_ship(cell):
            self.my_grid[y][x] = HIT
            status = Status.HIT
        elif cell in (HIT, MISS):
            self.my_grid[y][x] = MISS
            status = Status.MISSED
        if not self.has_ships():
            status = Status.WIN
        return status

    def has_ships(self) -> bool:
        """Tell whether any ship cell is still untouched."""
        return any(_is_ship(cell) for row in self.my_grid for cell in row)

    def record_result(self, x: int, y: int, status: int) -> None:
        """Mark the outcome of an own shot on the enemy grid."""
        if status in (Status.HIT, Status.WIN):
            self.enemy_grid[y][x] = HIT
        elif status == Status.MISSED:
            self.enemy_grid[y][x] = MISS

    def render(self) -> str:
        """Render both grids, own positions first."""
        return format_grid("my positions", self.my_grid) + format_grid(
            "enemy's positions", self.enemy_grid
        )