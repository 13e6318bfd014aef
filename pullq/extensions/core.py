from __future__ import annotations
import typing
from .. import ops
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class _CoreOperations(Generic[T]):
    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: ops.filter(self.sequence(), lambda item, _: predicate(item)))

    def where_with_index(self: 'Enumerable[T]', predicate: IndexedPredicate[T]) -> 'Enumerable[T]':
        """filter with predicate(item, index); the index counts every pulled element"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: ops.filter(self.sequence(), predicate))

    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: ops.map(self.sequence(), lambda item, _: selector(item)))

    def select_with_index(self: 'Enumerable[T]', selector: IndexedSelector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form, using the element's index"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: ops.map(self.sequence(), selector))

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: ops.take(self.sequence(), count))

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: ops.skip(self.sequence(), count))

    def reverse(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """inverts the order of the elements in a sequence"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: ops.reverse(self.sequence()))

    def append(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """
        puts element at the FRONT of the sequence.
        the head insertion is long-standing behavior; use prepend() to add at the end.
        """
        from ..enumerable import Enumerable
        return Enumerable(lambda: ops.append(self.sequence(), element))

    def prepend(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """puts element at the END of the sequence (see append)"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: ops.prepend(self.sequence(), element))

    def concat(self: 'Enumerable[T]', other: Iterable[S]) -> 'Enumerable[Union[T, S]]':
        """concatenate with another sequence, preserving all elements and order."""
        from ..enumerable import Enumerable
        return Enumerable(lambda: ops.concat(self.sequence(), other))
