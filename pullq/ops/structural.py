from __future__ import annotations

import logging
from ..types import *
from ..config import report_buffer
from ..sequence import Sequence, Pull, DONE, emit, as_sequence

logger = logging.getLogger(__name__)


class ChainSequence(Sequence[Any]):
    """drains each part in turn. parts are adopted lazily, one at a time."""

    def __init__(self, parts: List[Iterable[Any]]):
        super().__init__()
        self._parts = parts
        self._current: Optional[Sequence[Any]] = None
        self._part_index = 0

    def _advance(self) -> Pull:
        while True:
            if self._current is None:
                if self._part_index >= len(self._parts):
                    return DONE
                self._current = as_sequence(self._parts[self._part_index])
                self._parts[self._part_index] = None
                self._part_index += 1
            result = self._current.pull()
            if not result.done:
                return result
            self._current = None

    def _release(self) -> None:
        self._parts = []
        self._current = None


class SkipSequence(Sequence[T]):
    def __init__(self, source: Iterable[T], count: int):
        super().__init__()
        self._source = as_sequence(source)
        self._to_skip = count

    def _advance(self) -> Pull:
        while self._to_skip > 0:
            self._to_skip -= 1
            if self._source.pull().done:
                return DONE
        return self._source.pull()

    def _release(self) -> None:
        self._source = None


class TakeSequence(Sequence[T]):
    def __init__(self, source: Iterable[T], count: int):
        super().__init__()
        self._source = as_sequence(source)
        self._remaining = count

    def _advance(self) -> Pull:
        # nothing is pulled upstream once the count is used up
        if self._remaining <= 0:
            return DONE
        self._remaining -= 1
        return self._source.pull()

    def _release(self) -> None:
        self._source = None


class ReverseSequence(Sequence[T]):
    def __init__(self, source: Iterable[T]):
        super().__init__()
        self._source = as_sequence(source)
        self._buffer: Optional[List[T]] = None
        self._position = 0

    def _advance(self) -> Pull:
        if self._buffer is None:
            self._buffer = list(self._source)
            self._source = None
            self._position = len(self._buffer)
            report_buffer(logger, 'reverse', len(self._buffer))
        if self._position == 0:
            return DONE
        self._position -= 1
        return emit(self._buffer[self._position])

    def _release(self) -> None:
        self._source = None
        self._buffer = None


def append(source: Iterable[T], element: T) -> Sequence[T]:
    """yield element FIRST, then the source. note the head insertion."""
    return ChainSequence([[element], source])


def prepend(source: Iterable[T], element: T) -> Sequence[T]:
    """yield the source, then element LAST. note the tail insertion."""
    return ChainSequence([source, [element]])


def concat(source: Iterable[T], other: Iterable[S]) -> Sequence[Union[T, S]]:
    """all of source, then all of other"""
    return ChainSequence([source, other])


def skip(source: Iterable[T], count: int) -> Sequence[T]:
    """discard up to count leading items, then yield the rest"""
    return SkipSequence(source, count)


def take(source: Iterable[T], count: int) -> Sequence[T]:
    """yield at most count leading items"""
    return TakeSequence(source, count)


def reverse(source: Iterable[T]) -> Sequence[T]:
    """buffer the whole source on the first pull, then yield it last to first"""
    return ReverseSequence(source)
