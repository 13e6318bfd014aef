from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Hashable
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')
S = TypeVar('S')

Predicate = Callable[[T], bool]
IndexedPredicate = Callable[[T, int], bool]
Selector = Callable[[T], U]
IndexedSelector = Callable[[T, int], U]
KeySelector = Callable[[T], K]
Stringifier = Callable[[T], Hashable]
KeyComparer = Callable[[K, K], bool]
Accumulator = Callable[[U, T], U]


def self_selector(item: T) -> T:
    """identity function, the default stringifier and value selector"""
    return item


def default_comparer(a: Any, b: Any) -> bool:
    """default key comparer for group_compared. value equality, so 1, 1.0 and True share a group."""
    return a == b


class KeyValue(Generic[K, V]):
    """a key paired with a value, as produced by mapping enumeration and group_by"""

    __slots__ = ('key', 'value')

    def __init__(self, key: K, value: V):
        self.key = key
        self.value = value

    def __iter__(self) -> Iterator[Any]:
        # allows `for key, value in seq`
        yield self.key
        yield self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyValue):
            return NotImplemented
        return self.key == other.key and self.value == other.value

    __hash__ = None  # value may be a mutable list

    def __repr__(self) -> str:
        return f"KeyValue(key={self.key!r}, value={self.value!r})"


class Group(KeyValue[K, List[V]]):
    """a key with the ordered list of values collected under it"""

    __slots__ = ()

    def __init__(self, key: K, value: Optional[List[V]] = None):
        super().__init__(key, value if value is not None else [])

    @property
    def count(self) -> int: return len(self.value)

    def __repr__(self) -> str:
        return f"Group(key={self.key!r}, value={self.value!r})"
