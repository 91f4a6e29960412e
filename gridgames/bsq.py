"""Find and mark the biggest square of empty cells in a map of obstacles."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path

from gridgames.text import leading_number

EMPTY = "."
OBSTACLE = "o"
FILLED = "x"

Grid = list[list[str]]


@dataclass(frozen=True)
class Square:
    """A square given by its bottom-right corner and its side length."""

    x: int = 1
    y: int = 1
    size: int = 0


@dataclass
class BsqMap:
    """A parsed map: declared row count, grid and line measurements."""

    rows: int
    width: int
    header_length: int
    grid: Grid = field(default_factory=list)

    @property
    def columns(self) -> int:
        """Header length (newline included) plus the width of the first row."""
        return self.header_length + self.width


def parse_map(text: str) -> BsqMap:
    """Parse a map: a header line holding the row count, then the rows."""
    header, newline, body = text.partition("\n")
    if not newline:
        raise ValueError("map has no header line")
    rows = leading_number(header)
    lines = body.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    width = len(lines[0]) if lines else 0
    wanted = max(rows, 0)
    if len(lines) < wanted:
        raise ValueError(f"map declares {rows} rows but holds {len(lines)}")
    grid = [list(line) for line in lines[:wanted]]
    return BsqMap(rows=rows, width=width, header_length=len(header) + 1, grid=grid)


def load_map(path: str | Path) -> BsqMap:
    """Read and parse the map stored at ``path``."""
    with open(path, encoding="latin-1", newline="") as stream:
        return parse_map(stream.read())


def _cell(sizes: list[list[int]], i: int, j: int) -> int:
    row = sizes[i]
    return row[j] if j < len(row) else 0


def largest_square(grid: Grid) -> Square:
    """Return the biggest square of empty cells, first found in reading order.

    Only squares whose bottom-right corner lies off the first row and first
    column are considered.
    """
    sizes = [[1 if char == EMPTY else 0 for char in row] for row in grid]
    best = Square()
    for i in range(1, len(sizes)):
        current = sizes[i]
        for j in range(1, len(current)):
            if current[j]:
                current[j] += min(
                    _cell(sizes, i - 1, j),
                    current[j - 1],
                    _cell(sizes, i - 1, j - 1),
                )
            if current[j] > best.size:
                best = Square(x=j, y=i, size=current[j])
    return best


def _copy(grid: Grid) -> Grid:
    return [list(row) for row in grid]


def fill_first_in_row(grid: Grid) -> Grid:
    """Return a copy with the first empty cell of the first row filled."""
    result = _copy(grid)
    if result and EMPTY in result[0]:
        result[0][result[0].index(EMPTY)] = FILLED
    return result


def fill_first_in_column(grid: Grid) -> Grid:
    """Return a copy with the first empty cell of the first column filled."""
    result = _copy(grid)
    for row in result:
        if row and row[0] == EMPTY:
            row[0] = FILLED
            break
    return result


def solve(bsq_map: BsqMap) -> Grid:
    """Return the map's grid with the chosen square marked."""
    grid = _copy(bsq_map.grid)
    rows, columns = bsq_map.rows, bsq_map.columns
    corner = grid[0][0] if grid and grid[0] else ""

    if rows == 1 and corner == OBSTACLE:
        grid = fill_first_in_row(grid)
    if columns <= 5 and corner == OBSTACLE:
        grid = fill_first_in_column(grid)

    square = largest_square(grid)
    size = square.size
    if corner == EMPTY and (size == 1 or rows == 1 or columns <= 5):
        grid[0][0] = FILLED
        size = 0
    if size == 1 and corner == OBSTACLE:
        grid = fill_first_in_row(grid)
        size = 0

    for i in range(square.y, square.y - size, -1):
        for j in range(square.x, square.x - size, -1):
            grid[i][j] = FILLED
    return grid


def render(grid: Grid, width: int) -> str:
    """Render each row cut to ``width`` characters, one per line."""
    return "".join("".join(row[:width]) + "\n" for row in grid)


def main(argv: list[str] | None = None) -> int:
    """Solve the map named on the command line and print it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("usage: bsq map_file", file=sys.stderr)
        return 84
    try:
        bsq_map = load_map(args[0])
    except (OSError, ValueError) as error:
        print(f"bsq: {error}", file=sys.stderr)
        return 84
    sys.stdout.write(render(solve(bsq_map), bsq_map.width))
    return 0


if __name__ == "__main__":
    sys.exit(main())