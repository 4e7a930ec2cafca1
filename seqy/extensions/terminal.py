from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from functools import reduce
from ..iterators import pulling
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class TerminalAccessor(Generic[T]):
    """consumers that pull from the sequence. all of these must be given finite input,
    except the searches (first, any, all, first_repeated) which stop as soon as they can."""

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._enumerable)

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(list(self._enumerable))

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable)

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(list(self._enumerable))

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        with pulling(self._enumerable) as items:
            if predicate is None: return sum(1 for _ in items)
            return sum(1 for x in items if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition"""
        with pulling(self._enumerable) as items:
            for item in items:
                if predicate is None or predicate(item): return True
        return False

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        with pulling(self._enumerable) as items:
            return all(predicate(x) for x in items)

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element, closing the sequence behind it"""
        with pulling(self._enumerable) as items:
            for item in items:
                if predicate is None or predicate(item): return item
        if predicate is None: raise ValueError("sequence contains no elements")
        raise ValueError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        try: return self.first(predicate)
        except ValueError: return default

    def sum(self, start: Any = 0) -> Any:
        """sum of all elements"""
        with pulling(self._enumerable) as items:
            return sum(items, start)

    def max_by(self, key_selector: KeySelector[T, K]) -> T:
        """element with the largest key; the first one wins on ties"""
        best, best_key, found = None, None, False
        with pulling(self._enumerable) as items:
            for item in items:
                key = key_selector(item)
                if not found or key > best_key:
                    best, best_key, found = item, key, True
        if not found: raise ValueError("sequence contains no elements")
        return best

    def aggregate(self, accumulator: Accumulator[T, T], seed: Optional[T] = None) -> T:
        """applies accumulator function over sequence"""
        with pulling(self._enumerable) as items:
            if seed is not None: return reduce(accumulator, items, seed)
            try: first = next(items)
            except StopIteration: raise ValueError("cannot aggregate empty sequence without seed") from None
            return reduce(accumulator, items, first)

    def first_repeated(self, key_selector: Optional[KeySelector[T, K]] = None) -> T:
        """
        first element whose key has already been seen.
        stops pulling as soon as it is found, so it can run over infinite sequences.
        raises nosolutionerror if the sequence ends without a repeat.
        """
        seen = set()
        with pulling(self._enumerable) as items:
            for item in items:
                key = item if key_selector is None else key_selector(item)
                if key in seen: return item
                seen.add(key)
        raise NoSolutionError()
