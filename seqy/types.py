from types import MappingProxyType
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, Mapping, Sequence
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Accumulator = Callable[[U, T], U]
Factory = Callable[[], Iterable[T]]


class NoSolutionError(ValueError):
    """raised when a search walks a whole sequence without satisfying its condition"""

    def __init__(self, message: str = "no solution found"):
        super().__init__(message)


class MatchRecord:
    """
    immutable result of one pattern scan step.
    behaves like a tuple of the whole match followed by every capturing group
    (absent groups are none), so it can be indexed and unpacked directly.
    """

    __slots__ = ('_groups', '_index', '_named')

    def __init__(self, groups: Tuple[Optional[str], ...], index: int,
                 named: Optional[Dict[str, Optional[str]]] = None):
        object.__setattr__(self, '_groups', tuple(groups))
        object.__setattr__(self, '_index', index)
        object.__setattr__(self, '_named', MappingProxyType(dict(named or {})))

    @classmethod
    def from_match(cls, match: Any) -> 'MatchRecord':
        """build a record from an re.Match"""
        return cls((match.group(0),) + match.groups(), match.start(), match.groupdict())

    @property
    def index(self) -> int: return self._index

    @property
    def named(self) -> Mapping[str, Optional[str]]: return self._named

    @property
    def whole(self) -> str: return self._groups[0]

    def __setattr__(self, name, value):
        raise AttributeError("match records are immutable")

    def __iter__(self) -> Iterator[Optional[str]]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __getitem__(self, item):
        return self._groups[item]

    def __eq__(self, other) -> bool:
        if not isinstance(other, MatchRecord):
            return NotImplemented
        return self._groups == other._groups and self._index == other._index

    def __hash__(self) -> int:
        return hash((self._groups, self._index))

    def __repr__(self) -> str:
        return f"MatchRecord(groups={self._groups}, index={self._index})"
