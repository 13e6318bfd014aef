"""
identity-based set operators.

every operator takes an optional stringifier mapping an item to the hashable
key that decides "sameness". when omitted the item is its own key, which only
works for hashable items whose == matches the intended identity.
"""
from __future__ import annotations

import logging
from ..types import *
from ..config import report_buffer
from ..sequence import Sequence, Pull, DONE, emit, as_sequence
from .structural import concat

logger = logging.getLogger(__name__)


class DistinctSequence(Sequence[T]):
    def __init__(self, source: Iterable[T], stringifier: Stringifier[T]):
        super().__init__()
        self._source = as_sequence(source)
        self._stringifier = stringifier
        self._seen: Set[Hashable] = set()

    def _advance(self) -> Pull:
        while True:
            value, done = self._source.pull()
            if done:
                return DONE
            key = self._stringifier(value)
            if key not in self._seen:
                self._seen.add(key)
                return emit(value)

    def _release(self) -> None:
        self._source = None
        self._seen = None


class MembershipSequence(Sequence[T]):
    """
    streams `first`, keeping items whose key is (or is not) in the key set of
    `second`. `second` is consumed in full on the first pull.
    """

    def __init__(self, first: Iterable[T], second: Iterable[T],
                 stringifier: Stringifier[T], keep_members: bool, name: str):
        super().__init__()
        self._first = as_sequence(first)
        self._second = second
        self._stringifier = stringifier
        self._keep_members = keep_members
        self._name = name
        self._keys: Optional[Set[Hashable]] = None

    def _advance(self) -> Pull:
        if self._keys is None:
            self._keys = {self._stringifier(other) for other in self._second}
            self._second = None
            report_buffer(logger, self._name, len(self._keys), 'keys')
        while True:
            value, done = self._first.pull()
            if done:
                return DONE
            if (self._stringifier(value) in self._keys) == self._keep_members:
                return emit(value)

    def _release(self) -> None:
        self._first = None
        self._second = None
        self._keys = None


def _resolve(stringifier: Optional[Stringifier[T]]) -> Stringifier[T]:
    return stringifier if stringifier is not None else self_selector


def distinct(source: Iterable[T], stringifier: Optional[Stringifier[T]] = None) -> Sequence[T]:
    """first occurrence of each identity key, in source order"""
    return DistinctSequence(source, _resolve(stringifier))


def except_(first: Iterable[T], second: Iterable[T],
            stringifier: Optional[Stringifier[T]] = None) -> Sequence[T]:
    """items of first whose identity key does not occur in second"""
    return MembershipSequence(first, second, _resolve(stringifier), False, 'except')


def intersect(first: Iterable[T], second: Iterable[T],
              stringifier: Optional[Stringifier[T]] = None) -> Sequence[T]:
    """items of first whose identity key occurs in second"""
    return MembershipSequence(first, second, _resolve(stringifier), True, 'intersect')


def union(first: Iterable[T], second: Iterable[T],
          stringifier: Optional[Stringifier[T]] = None) -> Sequence[T]:
    """distinct(concat(first, second)): the first occurrence across both wins"""
    return distinct(concat(first, second), stringifier)
