from __future__ import annotations

from ..types import *
from ..sequence import Sequence, Pull, DONE, emit, as_sequence


class MapSequence(Sequence[U]):
    def __init__(self, source: Iterable[T], selector: IndexedSelector[T, U]):
        super().__init__()
        self._source = as_sequence(source)
        self._selector = selector
        self._index = 0

    def _advance(self) -> Pull:
        value, done = self._source.pull()
        if done:
            return DONE
        index = self._index
        self._index += 1
        return emit(self._selector(value, index))

    def _release(self) -> None:
        self._source = None


class FilterSequence(Sequence[T]):
    def __init__(self, source: Iterable[T], predicate: IndexedPredicate[T]):
        super().__init__()
        self._source = as_sequence(source)
        self._predicate = predicate
        self._index = 0

    def _advance(self) -> Pull:
        while True:
            value, done = self._source.pull()
            if done:
                return DONE
            # the index counts pulls, rejected items included
            index = self._index
            self._index += 1
            if self._predicate(value, index):
                return emit(value)

    def _release(self) -> None:
        self._source = None


def map(source: Iterable[T], selector: IndexedSelector[T, U]) -> Sequence[U]:
    """project each item with selector(item, index), one upstream pull per output"""
    return MapSequence(source, selector)


def filter(source: Iterable[T], predicate: IndexedPredicate[T]) -> Sequence[T]:
    """keep items for which predicate(item, index) is true"""
    return FilterSequence(source, predicate)
