"""A small chained hash table mapping a key to a list of values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .text import to_lowercase

TABLE_SIZE = 200

_MASK32 = 0xFFFFFFFF


def hash_key(key: str) -> int:
    """Return the bucket index of ``key`` (shift-and-add over signed UTF-8 bytes)."""
    value = 0
    for byte in key.encode("utf-8"):
        signed = byte - 256 if byte >= 128 else byte
        value = ((value << 5) + signed) & _MASK32
    return value % TABLE_SIZE


@dataclass
class Entry:
    """A key together with the values added under it, in insertion order."""

    key: str
    values: list[str] = field(default_factory=list)


class Dictionary:
    """Hash table with separate chaining; each key collects many values."""

    def __init__(self) -> None:
        self._buckets: list[list[Entry]] = [[] for _ in range(TABLE_SIZE)]
        self._size = 0

    def add(self, key: str, value: str) -> None:
        """Append ``value`` to the entry for ``key``, creating it if needed."""
        bucket = self._buckets[hash_key(key)]
        for entry in bucket:
            if entry.key == key:
                entry.values.append(value)
                return
        bucket.append(Entry(key, [value]))
        self._size += 1

    def get(self, key: str) -> Entry | None:
        """Find the entry for ``key``.

        The bucket is chosen from ``key`` as given; within it, keys are
        compared without regard to ASCII case.
        """
        wanted = to_lowercase(key)
        for entry in self._buckets[hash_key(key)]:
            if to_lowercase(entry.key) == wanted:
                return entry
        return None

    def delete(self, key: str) -> None:
        """Remove the entry whose key equals ``key`` exactly; do nothing if absent."""
        bucket = self._buckets[hash_key(key)]
        for position, entry in enumerate(bucket):
            if entry.key == key:
                del bucket[position]
                self._size -= 1
                return

    def keys(self) -> list[str]:
        """Return all keys, ordered by bucket then by insertion within a bucket."""
        return [entry.key for bucket in self._buckets for entry in bucket]

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())