"""A store holding named items."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class StoreItem:
    """An item identified by its name."""

    name: str = ""

    def equals(self, other: StoreItem) -> bool:
        """Return True when both items have the same name."""
        return self.name == other.name

    def __str__(self) -> str:
        return f"Item name: {self.name}"


@dataclass
class Store:
    """A named store with an ordered collection of items."""

    name: str = ""
    items: list[StoreItem] = field(default_factory=list)

    def add_item(self, item: StoreItem) -> None:
        """Append an item to the store."""
        self.items.append(item)

    def __iter__(self) -> Iterator[StoreItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        lines = [f"Store: {self.name}", "----------------"]
        lines.extend(str(item) for item in self.items)
        return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Build a small store and print it."""
    del argv
    store = Store("Test Store")
    store.add_item(StoreItem("Apple"))
    store.add_item(StoreItem("Banana"))
    print(store)
    return 0


if __name__ == "__main__":
    sys.exit(main())