"""A separately chained hash table with an optional load-factor rehash."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

_MULTIPLIER = 27
_MAX_LOAD_FACTOR = 0.7
_DEFAULT_TABLE_SIZE = 7


def bucket_index(key: str, table_size: int) -> int:
    """Return the bucket for ``key`` using a polynomial hash reduced modulo ``table_size``."""
    if table_size < 1:
        raise ValueError("table_size must be at least 1")
    idx = 0
    p = 1
    for byte in key.encode("utf-8"):
        idx = (idx + (byte * p) % table_size) % table_size
        p = (p * _MULTIPLIER) % table_size
    return idx


@dataclass(slots=True)
class _Entry:
    key: str
    value: Any


class HashTable:
    """Map string keys to values.

    Each bucket holds a chain of entries. New entries go to the head of
    their chain, so duplicate keys are kept and the newest one wins on
    lookup. With ``rehash`` enabled the table doubles in size whenever the
    load factor goes above 0.7.
    """

    def __init__(self, table_size: int = _DEFAULT_TABLE_SIZE, rehash: bool = True) -> None:
        if table_size < 1:
            raise ValueError("table_size must be at least 1")
        self._table: list[list[_Entry]] = [[] for _ in range(table_size)]
        self._size = 0
        self._rehash_enabled = rehash

    @property
    def table_size(self) -> int:
        """The number of buckets."""
        return len(self._table)

    def _place(self, key: str, value: Any) -> None:
        self._table[bucket_index(key, len(self._table))].insert(0, _Entry(key, value))
        self._size += 1

    def _rehash(self) -> None:
        old_table = self._table
        self._table = [[] for _ in range(2 * len(old_table))]
        self._size = 0
        for chain in old_table:
            for entry in chain:
                self._place(entry.key, entry.value)

    def insert(self, key: str, value: Any) -> None:
        """Add ``key`` with ``value`` at the head of its chain, growing the table if needed."""
        self._place(key, value)
        if self._rehash_enabled and self._size / len(self._table) > _MAX_LOAD_FACTOR:
            self._rehash()

    def _find(self, key: str) -> _Entry | None:
        chain = self._table[bucket_index(key, len(self._table))]
        return next((entry for entry in chain if entry.key == key), None)

    def search(self, key: str) -> Any:
        """Return the newest value stored under ``key``, or ``None`` if it is absent."""
        entry = self._find(key)
        return None if entry is None else entry.value

    def __getitem__(self, key: str) -> Any:
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __setitem__(self, key: str, value: Any) -> None:
        entry = self._find(key)
        if entry is None:
            self.insert(key, value)
        else:
            entry.value = value

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        for chain in self._table:
            for entry in chain:
                yield entry.key

    def buckets(self) -> list[list[tuple[str, Any]]]:
        """Return every chain, head first, as lists of ``(key, value)`` pairs."""
        return [[(entry.key, entry.value) for entry in chain] for chain in self._table]

    def format(self) -> str:
        """Render one line per bucket listing its keys in chain order."""
        lines = []
        for i, chain in enumerate(self._table):
            keys = "".join(f"{entry.key} -> " for entry in chain)
            lines.append(f"Bucket {i} ->{keys}\n")
        return "".join(lines)


_MENU = (
    ("Burger", 110),
    ("Noodle", 160),
    ("Pasta", 130),
    ("Cake", 1120),
    ("Old Monk", 1200),
    ("Chips", 10),
    ("Momo", 100),
    ("Beer", 180),
)


def main(argv: list[str] | None = None) -> int:
    """Build a price menu, print its buckets and look a few items up."""
    parser = argparse.ArgumentParser(description="Demonstrate the chained hash table.")
    parser.add_argument("--table-size", type=int, default=_DEFAULT_TABLE_SIZE)
    parser.add_argument("--no-rehash", action="store_true", help="never grow the table")
    args = parser.parse_args(argv)

    try:
        price_menu = HashTable(args.table_size, rehash=not args.no_rehash)
    except ValueError as exc:
        parser.error(str(exc))

    for name, price in _MENU:
        price_menu.insert(name, price)
    print(price_menu.format(), end="")

    price = price_menu.search("Noodle")
    print("Not Found" if price is None else f"Price is {price}")

    price_menu["Dosa"] = 60
    price_menu["Dosa"] += 10
    print(f"Price of Dosa {price_menu['Dosa']}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())