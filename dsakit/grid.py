"""A two-dimensional grid of integers."""

from __future__ import annotations

import sys


class Grid:
    """A rows x cols grid whose cells start as row-major positions."""

    def __init__(self, rows: int = 0, cols: int = 0) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("rows and cols must be non-negative")
        self._rows = rows
        self._cols = cols
        self._cells = [[cols * i + j for j in range(cols)] for i in range(rows)]

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def _locate(self, position: tuple[int, int]) -> tuple[int, int]:
        row, col = position
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(f"position {position!r} outside grid")
        return row, col

    def __getitem__(self, position: tuple[int, int]) -> int:
        row, col = self._locate(position)
        return self._cells[row][col]

    def __setitem__(self, position: tuple[int, int], value: int) -> None:
        row, col = self._locate(position)
        self._cells[row][col] = value

    def copy(self) -> Grid:
        """Return an independent copy of the grid."""
        duplicate = Grid()
        duplicate._rows = self._rows
        duplicate._cols = self._cols
        duplicate._cells = [list(row) for row in self._cells]
        return duplicate

    def __str__(self) -> str:
        return "\n".join(" ".join(str(value) for value in row) for row in self._cells)


def main(argv: list[str] | None = None) -> int:
    """Show a 5x5 grid, a copy and an assigned copy."""
    del argv
    grid = Grid(5, 5)
    print(f"Rows: {grid.rows} Cols: {grid.cols}")
    print(grid)
    grid2 = grid.copy()
    print("Printing grid2 from copy constructor")
    print(grid2)
    grid3 = grid.copy()
    print("Printing grid from copy assignment")
    print(grid3)
    return 0


if __name__ == "__main__":
    sys.exit(main())