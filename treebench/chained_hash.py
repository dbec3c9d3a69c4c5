"""Hash table with separate chaining that doubles when its load factor grows too high."""

from typing import Iterator, List, Optional, Tuple


def polynomial_hash(key: str, size: int) -> int:
    """Base-31 polynomial hash of ``key``, reduced modulo ``size`` at every step."""
    if size <= 0:
        raise ValueError("table size must be positive")
    value = 0
    for char in key:
        value = (value * 31 + ord(char)) % size
    return value


class ChainedHashTable:
    """String-keyed table of integers; each slot holds a chain of (key, value) pairs.

    Before every insertion the load factor the table would reach is compared with
    ``threshold``; when it would be exceeded the table doubles in size first.
    Inserting an existing key replaces its value.
    """

    def __init__(self, size: int, threshold: float) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self._buckets: List[List[Tuple[str, int]]] = [[] for _ in range(size)]
        self.threshold = threshold
        self._count = 0

    @property
    def size(self) -> int:
        """Number of slots."""
        return len(self._buckets)

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.search(key) is not None

    def __iter__(self) -> Iterator[str]:
        for bucket in self._buckets:
            for key, _ in bucket:
                yield key

    def _bucket(self, key: str) -> List[Tuple[str, int]]:
        return self._buckets[polynomial_hash(key, self.size)]

    def _resize(self) -> None:
        old = self._buckets
        self._buckets = [[] for _ in range(len(old) * 2)]
        for bucket in old:
            for pair in bucket:
                self._bucket(pair[0]).append(pair)

    def insert(self, key: str, value: int) -> None:
        """Store ``value`` under ``key``, growing the table first if needed."""
        if (self._count + 1) / self.size > self.threshold:
            self._resize()
        bucket = self._bucket(key)
        for position, (existing, _) in enumerate(bucket):
            if existing == key:
                bucket[position] = (key, value)
                return
        bucket.append((key, value))
        self._count += 1

    def search(self, key: str) -> Optional[int]:
        """The value stored under ``key``, or None if it is absent."""
        for existing, value in self._bucket(key):
            if existing == key:
                return value
        return None

    def remove(self, key: str) -> bool:
        """Delete ``key``; return whether it was present."""
        bucket = self._bucket(key)
        for position, (existing, _) in enumerate(bucket):
            if existing == key:
                del bucket[position]
                self._count -= 1
                return True
        return False

    def render(self) -> str:
        """One line per slot: its chain ending in NULL, or NIL when empty."""
        lines = []
        for index, bucket in enumerate(self._buckets):
            if bucket:
                chain = "".join(f"({key}, {value}) -> " for key, value in bucket)
                lines.append(f"{index}: {chain}NULL\n")
            else:
                lines.append(f"{index}: NIL\n")
        return "".join(lines)