"""Hash table with six collision strategies, plus a timing harness."""

import argparse
import enum
import logging
import random
import sys
import time
from collections import deque
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from treebench.keyed_avl import KeyedAVLTree

logger = logging.getLogger(__name__)

_MASK64 = (1 << 64) - 1
MAX_LOAD_FACTOR = 0.75
DEFAULT_TABLE_SIZE = 100003
DEFAULT_DELETES = 100
DEFAULT_DATA_FILES = (
    "data/no_collision_data.txt",
    "data/low_collision_data.txt",
    "data/high_collision_data.txt",
)

Pair = Tuple[str, int]


class CollisionHandling(enum.IntEnum):
    """How colliding keys are stored."""

    CHAINING_VECTOR = 0
    CHAINING_LIST = 1
    CHAINING_BST = 2
    LINEAR_PROBING = 3
    QUADRATIC_PROBING = 4
    DOUBLE_HASHING = 5

    @property
    def probing(self) -> bool:
        """Whether the strategy uses open addressing."""
        return self >= CollisionHandling.LINEAR_PROBING


def _signed_bytes(key: str) -> Iterator[int]:
    for byte in key.encode("utf-8"):
        yield byte - 256 if byte >= 128 else byte


@dataclass(frozen=True)
class TableStats:
    """Occupancy figures of a table; ``max_chain_length`` is None for probing tables."""

    total_elements: int
    load_factor: float
    empty_buckets: int
    max_chain_length: Optional[int]

    def render(self) -> str:
        lines = [
            f"Total elements: {self.total_elements}\n",
            f"Load factor: {self.load_factor:g}\n",
            f"Empty buckets: {self.empty_buckets}\n",
        ]
        if self.max_chain_length is not None:
            lines.append(f"Max chain length: {self.max_chain_length}\n")
        return "".join(lines)


@dataclass(frozen=True)
class BenchmarkResult:
    """Elapsed microseconds of each benchmark phase."""

    insert_us: int
    search_us: int
    delete_us: int

    def render(self) -> str:
        return (
            f"Insertion time: {self.insert_us} microseconds\n"
            f"Search time: {self.search_us} microseconds\n"
            f"Deletion time: {self.delete_us} microseconds\n"
        )


class HashTable:
    """String-keyed table of integers using one of the CollisionHandling strategies.

    The table doubles whenever its load factor exceeds 0.75 at the start of an
    insert or a remove. Chained tables keep appending on insert (an earlier
    entry with the same key has its value updated first); the tree-chained
    and probing tables store each key once per slot.
    """

    def __init__(
        self, size: int, method: CollisionHandling = CollisionHandling.CHAINING_VECTOR
    ) -> None:
        method = CollisionHandling(method)
        if size <= 0:
            raise ValueError("table size must be positive")
        if method is CollisionHandling.DOUBLE_HASHING and size < 2:
            raise ValueError("double hashing needs at least two slots")
        self.method = method
        self._reset(size)

    def _reset(self, size: int) -> None:
        self._size = size
        self._count = 0
        if self.method.probing:
            self._buckets: list = [None] * size
        elif self.method is CollisionHandling.CHAINING_BST:
            self._buckets = [KeyedAVLTree() for _ in range(size)]
        elif self.method is CollisionHandling.CHAINING_LIST:
            self._buckets = [deque() for _ in range(size)]
        else:
            self._buckets = [[] for _ in range(size)]

    @property
    def size(self) -> int:
        """Number of slots."""
        return self._size

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.search(key) is not None

    def _hash1(self, key: str) -> int:
        value = 0
        for char in _signed_bytes(key):
            value = (value * 31 + char) & _MASK64
        return value % self._size

    def _hash2(self, key: str) -> int:
        value = 5381
        for char in _signed_bytes(key):
            value = ((value << 5) + value + char) & _MASK64
        return 1 + value % (self._size - 1)

    def _probe_sequence(self, key: str) -> Iterator[int]:
        index = self._hash1(key)
        step = self._hash2(key) if self.method is CollisionHandling.DOUBLE_HASHING else 0
        for i in range(self._size):
            if self.method is CollisionHandling.LINEAR_PROBING:
                index = (index + i) % self._size
            elif self.method is CollisionHandling.QUADRATIC_PROBING:
                index = (index + i * i) % self._size
            else:
                index = (index + i * step) % self._size
            yield index

    def _items(self) -> Iterator[Pair]:
        if self.method.probing:
            yield from (slot for slot in self._buckets if slot is not None)
        elif self.method is CollisionHandling.CHAINING_BST:
            for tree in self._buckets:
                yield from tree.items()
        else:
            for bucket in self._buckets:
                yield from bucket

    def _rehash(self) -> None:
        items = list(self._items())
        self._reset(self._size * 2)
        for key, value in items:
            self.insert(key, value)
        logger.info("Table resized to %d slots.", self._size)

    def _resize_if_needed(self) -> None:
        if self._count / self._size > MAX_LOAD_FACTOR:
            self._rehash()

    def insert(self, key: str, value: int) -> bool:
        """Store ``value`` under ``key``; False if a probing table found no free slot."""
        self._resize_if_needed()
        if self.method.probing:
            for index in self._probe_sequence(key):
                if self._buckets[index] is None:
                    self._buckets[index] = (key, value)
                    self._count += 1
                    return True
            return False
        bucket = self._buckets[self._hash1(key)]
        if self.method is CollisionHandling.CHAINING_BST:
            if bucket.search(key) is None:
                self._count += 1
            bucket.insert(key, value)
            return True
        for position, (existing, _) in enumerate(bucket):
            if existing == key:
                bucket[position] = (key, value)
                break
        bucket.append((key, value))
        self._count += 1
        return True

    def search(self, key: str) -> Optional[int]:
        """The value found under ``key``, or None if it is absent."""
        if self.method.probing:
            for index in self._probe_sequence(key):
                slot = self._buckets[index]
                if slot is not None and slot[0] == key:
                    return slot[1]
            return None
        bucket = self._buckets[self._hash1(key)]
        if self.method is CollisionHandling.CHAINING_BST:
            return bucket.search(key)
        for existing, value in bucket:
            if existing == key:
                return value
        return None

    def remove(self, key: str) -> bool:
        """Delete one entry for ``key``; return whether one was found."""
        self._resize_if_needed()
        if self.method.probing:
            for index in self._probe_sequence(key):
                slot = self._buckets[index]
                if slot is not None and slot[0] == key:
                    self._buckets[index] = None
                    self._count -= 1
                    return True
            return False
        bucket = self._buckets[self._hash1(key)]
        if self.method is CollisionHandling.CHAINING_BST:
            removed = bucket.remove(key)
            if removed:
                self._count -= 1
            return removed
        for position, (existing, _) in enumerate(bucket):
            if existing == key:
                del bucket[position]
                self._count -= 1
                return True
        return False

    def stats(self) -> TableStats:
        """Count stored entries, empty slots and (for chaining) the longest chain."""
        if self.method.probing:
            total = sum(1 for slot in self._buckets if slot is not None)
            return TableStats(total, total / self._size, self._size - total, None)
        lengths = [len(bucket) for bucket in self._buckets]
        total = sum(lengths)
        return TableStats(
            total_elements=total,
            load_factor=total / self._size,
            empty_buckets=sum(1 for length in lengths if length == 0),
            max_chain_length=max(lengths, default=0),
        )


def read_data(path: str) -> List[Pair]:
    """Read whitespace-separated ``key value`` pairs, stopping at the first bad pair."""
    with open(path, encoding="utf-8") as handle:
        tokens = handle.read().split()
    data: List[Pair] = []
    for key, raw in zip(tokens[::2], tokens[1::2]):
        try:
            value = int(raw)
        except ValueError:
            break
        data.append((key, value))
    return data


def _check_sample(data: Sequence[Pair], num_search: int, num_delete: int) -> None:
    if not data and (num_search > 0 or num_delete > 0):
        raise ValueError("cannot pick random keys from empty data")


def _micros(start: int, end: int) -> int:
    return (end - start) // 1000


def benchmark_table(
    table: HashTable,
    data: Sequence[Pair],
    num_search: int,
    num_delete: int,
    rng: Optional[random.Random] = None,
) -> BenchmarkResult:
    """Time inserting all of ``data``, then random searches and random removals."""
    _check_sample(data, num_search, num_delete)
    rng = rng if rng is not None else random.Random()
    start = time.perf_counter_ns()
    for key, value in data:
        table.insert(key, value)
    insert_end = time.perf_counter_ns()
    for _ in range(num_search):
        table.search(data[rng.randrange(len(data))][0])
    search_end = time.perf_counter_ns()
    for _ in range(num_delete):
        table.remove(data[rng.randrange(len(data))][0])
    end = time.perf_counter_ns()
    return BenchmarkResult(
        _micros(start, insert_end), _micros(insert_end, search_end), _micros(search_end, end)
    )


def benchmark_dict(
    data: Sequence[Pair],
    num_search: int,
    num_delete: int,
    rng: Optional[random.Random] = None,
) -> BenchmarkResult:
    """Run the same benchmark against a built-in dict."""
    _check_sample(data, num_search, num_delete)
    rng = rng if rng is not None else random.Random()
    table: dict = {}
    start = time.perf_counter_ns()
    for key, value in data:
        table[key] = value
    insert_end = time.perf_counter_ns()
    for _ in range(num_search):
        table.get(data[rng.randrange(len(data))][0])
    search_end = time.perf_counter_ns()
    for _ in range(num_delete):
        table.pop(data[rng.randrange(len(data))][0], None)
    end = time.perf_counter_ns()
    return BenchmarkResult(
        _micros(start, insert_end), _micros(insert_end, search_end), _micros(search_end, end)
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Benchmark every strategy and a dict on each data file."""
    parser = argparse.ArgumentParser(description="Benchmark hash table strategies.")
    parser.add_argument("files", nargs="*", default=list(DEFAULT_DATA_FILES))
    parser.add_argument("--size", type=int, default=DEFAULT_TABLE_SIZE)
    parser.add_argument("--deletes", type=int, default=DEFAULT_DELETES)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    rng = random.Random(args.seed)
    heavy, light = "=" * 40, "-" * 40

    for path in args.files:
        print(f"\n{heavy}\nBenchmarking with data from: {path}\n{heavy}")
        try:
            data = read_data(path)
        except OSError:
            print(f"Error reading file: {path}", file=sys.stderr)
            data = []
        if not data:
            print("No data to benchmark.")
            continue
        num_search = len(data) // 2

        for method in CollisionHandling:
            print(f"\n{light}\nRunning benchmark for method: {method.value}\n{light}")
            table = HashTable(args.size, method)
            result = benchmark_table(table, data, num_search, args.deletes, rng)
            print(result.render(), end="")
            print(f"\nStatistics for method: {method.value}")
            print(table.stats().render(), end="")

        print(f"\n{light}\nRunning benchmark for built-in dict\n{light}")
        result = benchmark_dict(data, num_search, args.deletes, rng)
        print("dict Benchmark Results:")
        print(result.render(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())