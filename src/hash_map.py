import logging
from typing import TypeVar, Generic, Iterator, List, Optional, Tuple

V = TypeVar('V')

DEFAULT_CAPACITY = 16
DEFAULT_LOAD_FACTOR = 0.75

_PRIME = 31

logger = logging.getLogger(__name__)


def _hash(key: str, capacity: int) -> int:
    # Reduced every step so the accumulator stays below 31 * capacity.
    hash_code = 0
    for ch in key:
        hash_code = (_PRIME * hash_code + ord(ch)) % capacity
    return hash_code


def _check_key(key) -> None:
    if not isinstance(key, str):
        raise TypeError(f"HashMap keys must be str, not {type(key).__name__}")


class HashMap(Generic[V]):
    """String-keyed hash map using separate chaining.

    Buckets are allocated lazily: a slot stays ``None`` until the first key
    hashing to it is stored. Once ``size / capacity`` reaches the load factor,
    the next insertion of a new key doubles the capacity and rehashes every
    entry first. Capacity never shrinks.
    """

    def __init__(self, load_factor: float = DEFAULT_LOAD_FACTOR,
                 capacity: int = DEFAULT_CAPACITY) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValueError("capacity must be a positive integer")
        if (isinstance(load_factor, bool)
                or not isinstance(load_factor, (int, float))
                or not 0 < load_factor <= 1):
            raise ValueError("load_factor must be a number in (0, 1]")
        self._load_factor = load_factor
        self._capacity = capacity
        self._buckets: List[Optional[List[list]]] = [None] * capacity
        self._size = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def load_factor(self) -> float:
        return self._load_factor

    def _bucket_index(self, key: str) -> int:
        _check_key(key)
        index = _hash(key, self._capacity)
        if not 0 <= index < self._capacity:
            raise RuntimeError(
                f"HashMap: bucket index {index} out of range for capacity {self._capacity}"
            )
        return index

    def _resize(self) -> None:
        old_entries = self.entries()
        old_capacity = self._capacity
        self._capacity *= 2
        self._buckets = [None] * self._capacity
        self._size = 0
        for key, value in old_entries:
            self.set(key, value)
        logger.debug("resized from %d to %d buckets, rehashed %d entries",
                     old_capacity, self._capacity, len(old_entries))

    def set(self, key: str, value: V) -> None:
        index = self._bucket_index(key)
        bucket = self._buckets[index]
        if bucket is not None:
            for entry in bucket:
                if entry[0] == key:
                    entry[1] = value
                    return

        if self._size / self._capacity >= self._load_factor:
            self._resize()
            index = self._bucket_index(key)
            bucket = self._buckets[index]

        if bucket is None:
            bucket = []
            self._buckets[index] = bucket
        bucket.append([key, value])
        self._size += 1

    def get(self, key: str, default: Optional[V] = None) -> Optional[V]:
        """Return the value stored for ``key``, or ``default`` when absent."""
        bucket = self._buckets[self._bucket_index(key)]
        if bucket is not None:
            for k, v in bucket:
                if k == key:
                    return v
        return default

    def has(self, key: str) -> bool:
        bucket = self._buckets[self._bucket_index(key)]
        if bucket is None:
            return False
        for k, _ in bucket:
            if k == key:
                return True
        return False

    def remove(self, key: str) -> bool:
        bucket = self._buckets[self._bucket_index(key)]
        if bucket is None:
            return False
        for i, (k, _) in enumerate(bucket):
            if k == key:
                del bucket[i]
                self._size -= 1
                return True
        return False

    def length(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._buckets = [None] * self._capacity
        self._size = 0
        logger.debug("cleared, capacity stays %d", self._capacity)

    def keys(self) -> List[str]:
        result = []
        for bucket in self._buckets:
            if bucket is not None:
                for k, _ in bucket:
                    result.append(k)
        return result

    def values(self) -> List[V]:
        result = []
        for bucket in self._buckets:
            if bucket is not None:
                for _, v in bucket:
                    result.append(v)
        return result

    def entries(self) -> List[Tuple[str, V]]:
        result = []
        for bucket in self._buckets:
            if bucket is not None:
                for k, v in bucket:
                    result.append((k, v))
        return result

    def copy(self) -> 'HashMap[V]':
        """Create a copy with the same load factor and capacity.

        Note: Values are shared, not copied. Mutating a mutable value through
        one map is visible through the other.
        """
        clone: HashMap[V] = HashMap(self._load_factor, self._capacity)
        for k, v in self.entries():
            clone.set(k, v)
        return clone

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key) -> bool:
        if not isinstance(key, str):
            return False
        return self.has(key)

    def __getitem__(self, key: str) -> V:
        bucket = self._buckets[self._bucket_index(key)]
        if bucket is not None:
            for k, v in bucket:
                if k == key:
                    return v
        raise KeyError(key)

    def __setitem__(self, key: str, value: V) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        if not self.remove(key):
            raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self.entries())
        return f"HashMap({{{items}}})"
