from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from functools import reduce
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class TerminalAccessor(Generic[T]):
    """operations that run the query and return a concrete result"""

    _NONE = object()

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _run(self):
        return self._enumerable.sequence()

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._run())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._run())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary; later keys overwrite earlier ones"""
        val_sel = value_selector if value_selector else self_selector
        return {key_selector(item): val_sel(item) for item in self._run()}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return sum(1 for _ in self._run())
        return sum(1 for x in self._run() if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition; stops at the first match"""
        if predicate is None: return not self._run().pull().done
        return any(predicate(x) for x in self._run())

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return all(predicate(x) for x in self._run())

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        if predicate is None:
            value, done = self._run().pull()
            if done: raise ValueError("sequence contains no elements")
            return value
        for item in self._run():
            if predicate(item): return item
        raise ValueError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default. errors raised by callbacks still propagate."""
        if predicate is None:
            value, done = self._run().pull()
            return default if done else value
        for item in self._run():
            if predicate(item): return item
        return default

    def single(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get single element, erroring if not exactly one. pulls at most two matches."""
        matches = (x for x in self._run() if predicate is None or predicate(x))
        found = next(matches, self._NONE)
        if found is self._NONE: raise ValueError("sequence contains no matching elements")
        if next(matches, self._NONE) is not self._NONE:
            raise ValueError("sequence contains more than one matching element")
        return found

    def aggregate(self, accumulator: Accumulator[T, T], seed: Optional[T] = None) -> T:
        """applies accumulator function over sequence"""
        if seed is not None: return reduce(accumulator, self._run(), seed)
        source = self._run()
        first, done = source.pull()
        if done: raise ValueError("cannot aggregate empty sequence without seed")
        return reduce(accumulator, source, first)
