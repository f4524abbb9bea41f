"""Arithmetic helpers over three integers."""

from __future__ import annotations

import argparse
import sys


def three_ints_sum(num1: int, num2: int, num3: int) -> int:
    """Return the sum of three integers."""
    return num1 + num2 + num3


def three_ints_avg(num1: int, num2: int, num3: int) -> int:
    """Return the integer average of three integers, truncated toward zero."""
    total = num1 + num2 + num3
    quotient = abs(total) // 3
    return quotient if total >= 0 else -quotient


def main(argv: list[str] | None = None) -> int:
    """Print the sum and average of 5, 10 and 20."""
    parser = argparse.ArgumentParser(
        description="Show the sum and integer average of 5, 10 and 20."
    )
    parser.parse_args(argv)
    values = (5, 10, 20)
    print(
        "Testing three int sum and three int avg function on "
        + ", ".join(str(value) for value in values)
    )
    print(three_ints_sum(*values))
    print(three_ints_avg(*values))
    return 0


if __name__ == "__main__":
    sys.exit(main())