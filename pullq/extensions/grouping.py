from __future__ import annotations
import typing
from .. import ops
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class GroupingAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def group_by(self, key_selector: KeySelector[T, K],
                 value_selector: Optional[Selector[T, V]] = None) -> 'Enumerable[KeyValue[K, List[V]]]':
        """
        group elements by a hashable key.
        the grouping runs each time the result is iterated; dict(result) gives a key -> list map.
        """
        from ..enumerable import Enumerable
        return Enumerable(lambda: ops.group_by(self._enumerable.sequence(), key_selector, value_selector))

    def group_compared(self, key_selector: KeySelector[T, K],
                       key_comparer: Optional[KeyComparer[K]] = None,
                       value_selector: Optional[Selector[T, V]] = None) -> List[Group[K, V]]:
        """group by keys compared with key_comparer (default ==). runs immediately."""
        return ops.group_compared(self._enumerable.sequence(), key_selector, key_comparer, value_selector)
