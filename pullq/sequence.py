from __future__ import annotations

from abc import ABC, abstractmethod
from typing import NamedTuple
from .types import *


class Pull(NamedTuple):
    """the outcome of a single pull: a value, or the end of the sequence"""
    value: Any
    done: bool


DONE = Pull(None, True)


def emit(value: Any) -> Pull:
    return Pull(value, False)


class Sequence(ABC, Generic[T]):
    """
    a single-pass, pull-driven stream of elements.

    the only operation is pull(). a sequence owns its cursor: once a pull
    reports done, every later pull reports done again and nothing upstream is
    touched. to iterate again, call the producing operator again.
    """

    def __init__(self):
        self._exhausted = False

    @abstractmethod
    def _advance(self) -> Pull:
        """produce the next pull result. called only while not exhausted."""
        pass

    def _release(self) -> None:
        """drop any state held for iteration. called once on exhaustion."""
        pass

    def pull(self) -> Pull:
        if self._exhausted:
            return DONE
        result = self._advance()
        if result.done:
            self._exhausted = True
            self._release()
        return result

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    # --- python iteration protocol ---

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        value, done = self.pull()
        if done:
            raise StopIteration
        return value


class IterableSequence(Sequence[T]):
    """adapts a python iterator to the pull protocol"""

    _END = object()

    def __init__(self, iterator: Iterator[T]):
        super().__init__()
        self._iterator = iterator

    def _advance(self) -> Pull:
        value = next(self._iterator, self._END)
        if value is self._END:
            return DONE
        return emit(value)

    def _release(self) -> None:
        self._iterator = None


def as_sequence(source: Iterable[T]) -> Sequence[T]:
    """adopt any iterable as a sequence. sequences are returned unchanged."""
    if isinstance(source, Sequence):
        return source
    # iter() raises TypeError for non-iterables, which is left to the caller
    return IterableSequence(iter(source))


class EmptySequence(Sequence[Any]):
    def _advance(self) -> Pull:
        return DONE
