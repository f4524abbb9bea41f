"""Element-wise scaling and display of two-dimensional matrices."""

from __future__ import annotations

import sys
from typing import MutableSequence, Sequence


def scale_matrix(matrix: Sequence[MutableSequence[float]], factor: float) -> None:
    """Multiply every element of the matrix by factor, in place."""
    for row in matrix:
        row[:] = [value * factor for value in row]


def format_matrix(matrix: Sequence[Sequence[float]]) -> str:
    """Render the matrix one row per line, values separated by spaces."""
    return "\n".join(" ".join(f"{value:g}" for value in row) for row in matrix)


def _sample_matrix(rows: int, cols: int) -> list[list[float]]:
    return [[float(i * cols + j + 1) for j in range(cols)] for i in range(rows)]


def main(argv: list[str] | None = None) -> int:
    """Double a 2x5 matrix of 1..10 and print it."""
    del argv
    print("Local array version")
    local = _sample_matrix(2, 5)
    scale_matrix(local, 2)
    print(format_matrix(local))

    print("Dynamic array version")
    dynamic = _sample_matrix(2, 5)
    scale_matrix(dynamic, 2)
    print(format_matrix(dynamic))
    return 0


if __name__ == "__main__":
    sys.exit(main())