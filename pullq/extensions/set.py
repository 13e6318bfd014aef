from __future__ import annotations
import typing
from .. import ops
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class SetAccessor(Generic[T]):
    """
    identity-based set operations.
    each takes an optional stringifier producing the key that decides whether two
    elements are the same; without one the element itself is the key.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def distinct(self, stringifier: Optional[Stringifier[T]] = None) -> 'Enumerable[T]':
        """return distinct elements. preserves order of first appearance."""
        from ..enumerable import Enumerable
        return Enumerable(lambda: ops.distinct(self._enumerable.sequence(), stringifier))

    def union(self, other: Iterable[T], stringifier: Optional[Stringifier[T]] = None) -> 'Enumerable[T]':
        """return the order-preserving union of two sequences (distinct elements)."""
        from ..enumerable import Enumerable
        return Enumerable(lambda: ops.union(self._enumerable.sequence(), other, stringifier))

    def intersect(self, other: Iterable[T], stringifier: Optional[Stringifier[T]] = None) -> 'Enumerable[T]':
        """
        elements of this sequence whose key occurs in other, in this sequence's order.
        other is read in full before the first element comes out; duplicates here are kept.
        """
        from ..enumerable import Enumerable
        return Enumerable(lambda: ops.intersect(self._enumerable.sequence(), other, stringifier))

    def except_(self, other: Iterable[T], stringifier: Optional[Stringifier[T]] = None) -> 'Enumerable[T]':
        """elements of this sequence whose key does not occur in other (set difference)."""
        from ..enumerable import Enumerable
        return Enumerable(lambda: ops.except_(self._enumerable.sequence(), other, stringifier))
