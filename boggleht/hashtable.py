"""Open-addressing hash table with pluggable linear or double-hash probing."""

from __future__ import annotations

import operator
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, Iterator, TextIO, TypeVar

from boggleht.strhash import MyStringHash

K = TypeVar("K")
V = TypeVar("V")

CAPACITIES = (
    11, 23, 47, 97, 197, 397, 797, 1597, 3203, 6421, 12853, 25717, 51437, 102877,
    205759, 411527, 823117, 1646237, 3292489, 6584983, 13169977, 26339969, 52679969,
    105359969, 210719881, 421439783, 842879579, 1685759167,
)

DOUBLE_HASH_MOD_VALUES = (
    7, 19, 43, 89, 193, 389, 787, 1583, 3191, 6397, 12841, 25703, 51431, 102871,
    205721, 411503, 823051, 1646221, 3292463, 6584957, 13169963, 26339921, 52679927,
    105359939, 210719881, 421439749, 842879563, 1685759113,
)


class Prober(ABC):
    """A strategy that yields the table locations to try for a key."""

    @abstractmethod
    def probes(self, start: int, m: int, key: Any) -> Iterator[int]:
        """Yield at most ``m`` locations in a table of size ``m``, from ``start``."""


class LinearProber(Prober):
    """Tries ``start``, ``start + 1``, ... wrapping around the table."""

    def probes(self, start: int, m: int, key: Any) -> Iterator[int]:
        for i in range(m):
            yield (start + i) % m


class DoubleHashProber(Prober):
    """Steps through the table by an amount derived from a second hash of the key."""

    def __init__(self, h2: Callable[[Any], int] | None = None) -> None:
        self.h2 = h2 if h2 is not None else MyStringHash()

    @staticmethod
    def _modulus_for(table_size: int) -> int:
        modulus = DOUBLE_HASH_MOD_VALUES[0]
        for value in DOUBLE_HASH_MOD_VALUES:
            if value >= table_size:
                break
            modulus = value
        return modulus

    def probes(self, start: int, m: int, key: Any) -> Iterator[int]:
        modulus = self._modulus_for(m)
        step = modulus - self.h2(key) % modulus or 1
        for i in range(m):
            yield (start + i * step) % m


@dataclass
class _HashItem(Generic[K, V]):
    key: K
    value: V
    deleted: bool = False


class HashTable(Generic[K, V]):
    """Map from keys to values stored in a prime-sized open-addressed table.

    Removed entries are left as tombstones until the next resize. The table
    grows to the next capacity when (items + tombstones) / size reaches
    ``resize_alpha`` before an insertion.
    """

    def __init__(
        self,
        resize_alpha: float = 0.4,
        prober: Prober | None = None,
        hash_func: Callable[[K], int] = hash,
        key_equal: Callable[[K, K], bool] = operator.eq,
    ) -> None:
        self._resize_alpha = resize_alpha
        self._prober = prober if prober is not None else LinearProber()
        self._hash = hash_func
        self._key_equal = key_equal
        self._m_index = 0
        self._table: list[_HashItem[K, V] | None] = [None] * CAPACITIES[0]
        self._num_items = 0
        self._num_deleted = 0
        self._total_probes = 0

    def __len__(self) -> int:
        return self._num_items

    def empty(self) -> bool:
        """Return True if the table holds no live entries."""
        return self._num_items == 0

    def insert(self, key: K, value: V) -> None:
        """Add ``key`` with ``value``, or replace the value if the key is present.

        Raises RuntimeError if no free location can be found.
        """
        if (self._num_items + self._num_deleted) / len(self._table) >= self._resize_alpha:
            self._resize()
        loc = self._probe(key)
        if loc is None:
            raise RuntimeError("No free location to insert")
        slot = self._table[loc]
        if slot is None:
            self._table[loc] = _HashItem(key, value)
            self._num_items += 1
        elif slot.deleted:
            slot.key, slot.value, slot.deleted = key, value, False
            self._num_items += 1
            self._num_deleted -= 1
        else:
            slot.value = value

    def remove(self, key: K) -> None:
        """Mark the entry for ``key`` as deleted; do nothing if it is absent."""
        item = self._internal_find(key)
        if item is None or item.deleted:
            return
        item.deleted = True
        self._num_items -= 1
        self._num_deleted += 1

    def find(self, key: K) -> tuple[K, V] | None:
        """Return the ``(key, value)`` pair for ``key``, or None if absent."""
        item = self._internal_find(key)
        return None if item is None else (item.key, item.value)

    def at(self, key: K) -> V:
        """Return the value for ``key``; raise KeyError if it is absent."""
        item = self._internal_find(key)
        if item is None:
            raise KeyError(key)
        return item.value

    def __getitem__(self, key: K) -> V:
        return self.at(key)

    def __setitem__(self, key: K, value: V) -> None:
        """Replace the value of an existing key; raise KeyError if it is absent."""
        item = self._internal_find(key)
        if item is None:
            raise KeyError(key)
        item.value = value

    def __contains__(self, key: object) -> bool:
        return self._internal_find(key) is not None  # type: ignore[arg-type]

    def report_all(self, out: TextIO) -> None:
        """Write every occupied bucket, tombstones included, to ``out``."""
        for index, slot in enumerate(self._table):
            if slot is not None:
                out.write(f"Bucket {index}: {slot.key} {slot.value}\n")

    def clear_total_probes(self) -> None:
        """Reset the probe counter."""
        self._total_probes = 0

    def total_probes(self) -> int:
        """Return the number of probe steps taken since the last reset or resize."""
        return self._total_probes

    def _internal_find(self, key: K) -> _HashItem[K, V] | None:
        loc = self._probe(key)
        if loc is None:
            return None
        return self._table[loc]

    def _probe(self, key: K) -> int | None:
        capacity = CAPACITIES[self._m_index]
        start = self._hash(key) % capacity
        for loc in self._prober.probes(start, capacity, key):
            self._total_probes += 1
            slot = self._table[loc]
            if slot is None:
                return loc
            if not slot.deleted and self._key_equal(slot.key, key):
                return loc
        # the final, unsuccessful request for another location
        self._total_probes += 1
        return None

    def _resize(self) -> None:
        if self._m_index + 1 >= len(CAPACITIES):
            raise RuntimeError("No more sizes available")
        old_table = self._table
        self._m_index += 1
        self._table = [None] * CAPACITIES[self._m_index]
        self._total_probes = 0
        self._num_items = 0
        self._num_deleted = 0
        for slot in old_table:
            if slot is not None and not slot.deleted:
                loc = self._probe(slot.key)
                self._table[loc] = slot  # type: ignore[index]
                self._num_items += 1


def main(argv: list[str] | None = None) -> int:
    """Exercise a double-hashed table of strings and print what happens."""
    del argv
    table: HashTable[str, int] = HashTable(0.7, DoubleHashProber(MyStringHash()))
    for i in range(10):
        table.insert(f"hi{i}", i)
    if table.find("hi1") is not None:
        print("Found hi1")
        table["hi1"] += 1
        print(f"Incremented hi1's value to: {table['hi1']}")
    if table.find("doesnotexist") is None:
        print("Did not find: doesnotexist")
    print(f"HT size: {len(table)}")
    table.remove("hi7")
    table.remove("hi9")
    print(f"HT size: {len(table)}")
    if table.find("hi9") is not None:
        print("Found hi9")
    else:
        print("Did not find hi9")
    table.insert("hi7", 17)
    print(f"size: {len(table)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())