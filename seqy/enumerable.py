from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.combinatorics import CombinatoricsAccessor
from .extensions.utility import UtilityAccessor
from .extensions.terminal import TerminalAccessor
from .extensions.zip import ZipAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """start a pass over the sequence"""
        pass

    @property
    @abstractmethod
    def restartable(self) -> bool:
        """whether a second pass starts over from the beginning"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, source_func: Callable[[], Iterable[T]], restartable: bool = True):
        """init with a function that returns a fresh iterable for every pass"""
        self._source_func = source_func
        self._restartable = restartable

    @property
    def restartable(self) -> bool:
        return self._restartable

    def _derive(self, source_func: Callable[[], Iterable[U]]) -> 'Enumerable[U]':
        """wrap a derived source, inheriting this sequence's restartability"""
        return Enumerable(source_func, restartable=self._restartable)

    def __iter__(self) -> Iterator[T]:
        return iter(self._source_func())

    def __repr__(self) -> str:
        kind = "restartable" if self._restartable else "single-use"
        return f"{type(self).__name__}({kind})"

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a lazy, pull-based, linq-inspired sequence. nothing is produced until pulled."""
    def __init__(self, source_func: Callable[[], Iterable[T]], restartable: bool = True):
        super().__init__(source_func, restartable)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.zip = ZipAccessor(self)
        self.comb = CombinatoricsAccessor(self)
        self.util = UtilityAccessor(self)
        self.to = TerminalAccessor(self)
