"""sequences with no upstream source: mapping enumeration, ranges, repetition."""
from __future__ import annotations

from .types import *
from .sequence import Sequence, Pull, DONE, emit


def _own_items_source(mapping: Any) -> Any:
    """resolve what to enumerate: a mapping itself, or an object's own attributes"""
    if hasattr(mapping, 'keys') and hasattr(mapping, '__getitem__'):
        return mapping
    # instance attributes only, class attributes count as inherited
    return vars(mapping)


class MappingSequence(Sequence[KeyValue[Any, V]]):
    _MISSING = object()

    def __init__(self, mapping: Any):
        super().__init__()
        self._mapping = mapping
        self._keys: Optional[List[Any]] = None
        self._position = 0

    def _advance(self) -> Pull:
        if self._keys is None:
            self._mapping = _own_items_source(self._mapping)
            # snapshot so the mapping may be mutated while iterating
            self._keys = list(self._mapping.keys())
        while self._position < len(self._keys):
            key = self._keys[self._position]
            self._position += 1
            value = self._lookup(key)
            # keys removed before they were reached are skipped
            if value is not self._MISSING:
                return emit(KeyValue(key, value))
        return DONE

    def _lookup(self, key: Any) -> Any:
        # membership first: indexing a defaultdict would recreate a removed key
        if key not in self._mapping:
            return self._MISSING
        return self._mapping[key]

    def _release(self) -> None:
        self._mapping = None
        self._keys = None


class RangeSequence(Sequence[int]):
    def __init__(self, start: int, count: int):
        super().__init__()
        self._next = start
        self._remaining = count

    def _advance(self) -> Pull:
        if self._remaining <= 0:
            return DONE
        value = self._next
        self._next += 1
        self._remaining -= 1
        return emit(value)


class RepeatSequence(Sequence[T]):
    def __init__(self, value: T, count: int):
        super().__init__()
        self._value = value
        self._remaining = count

    def _advance(self) -> Pull:
        if self._remaining <= 0:
            return DONE
        self._remaining -= 1
        return emit(self._value)

    def _release(self) -> None:
        self._value = None


def from_mapping(mapping: Union[Dict[K, V], Any]) -> Sequence[KeyValue[K, V]]:
    """enumerate the own keys of a mapping (or an object's attributes) as KeyValue pairs"""
    return MappingSequence(mapping)


def from_range(start: int, count: int) -> Sequence[int]:
    """count consecutive integers from start; empty when count <= 0"""
    return RangeSequence(start, count)


def from_repeat(value: T, count: int) -> Sequence[T]:
    """the same value, count times"""
    return RepeatSequence(value, count)
