"""Generic minimum of two values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def my_min(val1: Any, val2: Any) -> Any:
    """Return the smaller of two values, preferring the first on ties."""
    return val2 if val1 > val2 else val1


@dataclass(frozen=True)
class Min(Generic[T]):
    """A pair of values that reports its minimum."""

    val1: T
    val2: T

    def get_min(self) -> T:
        """Return the smaller of the two stored values."""
        return my_min(self.val1, self.val2)