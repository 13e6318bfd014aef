import typing
from .types import *
from . import producers
from .sequence import EmptySequence, as_sequence

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """create enumerable from iterable. lists and other re-iterables can be queried repeatedly."""
    from .enumerable import Enumerable
    return Enumerable(lambda: as_sequence(data))

def from_mapping(mapping: Union[Dict[K, V], Any]) -> 'Enumerable[KeyValue[K, V]]':
    """create enumerable of key/value pairs from a mapping or an object's own attributes"""
    from .enumerable import Enumerable
    return Enumerable(lambda: producers.from_mapping(mapping))

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable from range"""
    from .enumerable import Enumerable
    return Enumerable(lambda: producers.from_range(start, count))

def repeat(item: T, count: int) -> 'Enumerable[T]':
    """create enumerable with repeated item"""
    from .enumerable import Enumerable
    return Enumerable(lambda: producers.from_repeat(item, count))

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(EmptySequence)

# --- aliases ---
pullq = from_iterable
P = from_iterable
