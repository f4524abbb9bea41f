"""A backtracking Sudoku solver for 9x9 grids."""

from __future__ import annotations

import sys
from typing import MutableSequence, Sequence

SIZE = 9
BOX = 3
UNASSIGNED = 0

_EXAMPLE = [
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 3, 0, 8, 5],
    [0, 0, 1, 0, 2, 0, 0, 0, 0],
    [0, 0, 0, 5, 0, 7, 0, 0, 0],
    [0, 0, 4, 0, 0, 0, 1, 0, 0],
    [0, 9, 0, 0, 0, 0, 0, 0, 0],
    [5, 0, 0, 0, 0, 0, 0, 7, 3],
    [0, 0, 2, 0, 1, 0, 0, 0, 0],
    [0, 0, 0, 0, 4, 0, 0, 0, 9],
]


def _check_shape(grid: Sequence[Sequence[int]]) -> None:
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        raise ValueError(f"grid must be {SIZE}x{SIZE}")


def is_safe(grid: Sequence[Sequence[int]], row: int, col: int, num: int) -> bool:
    """Return True when num appears in neither the row, the column nor the box."""
    if num in grid[row]:
        return False
    if any(line[col] == num for line in grid):
        return False
    top, left = row - row % BOX, col - col % BOX
    return all(
        num not in grid[r][left:left + BOX] for r in range(top, top + BOX)
    )


def _solve(grid: Sequence[MutableSequence[int]], cell: int) -> bool:
    if cell == SIZE * SIZE:
        return True
    row, col = divmod(cell, SIZE)
    if grid[row][col] != UNASSIGNED:
        return _solve(grid, cell + 1)
    for num in range(1, SIZE + 1):
        if is_safe(grid, row, col, num):
            grid[row][col] = num
            if _solve(grid, cell + 1):
                return True
            grid[row][col] = UNASSIGNED
    return False


def solve_sudoku(grid: Sequence[MutableSequence[int]]) -> bool:
    """Fill the zero cells of grid in place; return False if no solution exists."""
    _check_shape(grid)
    return _solve(grid, 0)


def format_grid(grid: Sequence[Sequence[int]]) -> str:
    """Render the grid one row per line, each value followed by a space."""
    return "\n".join("".join(f"{value} " for value in row) for row in grid)


def main(argv: list[str] | None = None) -> int:
    """Solve a hard example puzzle and print the result."""
    del argv
    grid = [list(row) for row in _EXAMPLE]
    print("This algorithm is slow! Be patient ...")
    if solve_sudoku(grid):
        print("Solution:")
        print(format_grid(grid))
    else:
        print("No solution found.")
    return 0


if __name__ == "__main__":
    sys.exit(main())