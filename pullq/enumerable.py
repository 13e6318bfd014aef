from __future__ import annotations

from .types import *
from .sequence import Sequence, as_sequence

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.terminal import TerminalAccessor

# --- main enumerable class ---

class Enumerable(_CoreOperations[T]):
    """
    a deferred, linq-style query over a single-pass sequence.

    an enumerable holds a recipe, not data: every iteration (and every terminal
    call under .to) asks the factory for a fresh sequence and pulls it. if the
    recipe wraps a one-shot iterator, only the first run sees its items.
    """
    def __init__(self, sequence_factory: Callable[[], Iterable[T]]):
        self._sequence_factory = sequence_factory
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.group = GroupingAccessor(self)
        self.to = TerminalAccessor(self)

    def sequence(self) -> Sequence[T]:
        """build a fresh single-pass sequence for this query"""
        return as_sequence(self._sequence_factory())

    def __iter__(self) -> Iterator[T]:
        return self.sequence()

    def __repr__(self) -> str:
        return f"Enumerable({self._sequence_factory!r})"
