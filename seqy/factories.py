import typing
from .types import *
from .extensions.set import _first_per_key
from .extensions.zip import zip_sequences
from .extensions.combinatorics import _combinations, cartesian_sequences
from .extensions.utility import cycle_factory

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """create enumerable from iterable. restartable unless data is itself an iterator."""
    from .enumerable import Enumerable
    from .iterators import is_restartable
    return Enumerable(lambda: data, restartable=is_restartable(data))

def from_iterator(iterator: Iterator[T]) -> 'Enumerable[T]':
    """create a single-use enumerable; a second pass yields nothing"""
    from .enumerable import Enumerable
    return Enumerable(lambda: iterator, restartable=False)

def from_factory(factory: Factory[T]) -> 'Enumerable[T]':
    """create a restartable enumerable that calls factory for every pass"""
    from .enumerable import Enumerable
    return Enumerable(factory, restartable=True)

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable from range"""
    from .enumerable import Enumerable
    return Enumerable(lambda: range(start, start + count))

def repeat(item: T, count: int) -> 'Enumerable[T]':
    """create enumerable with repeated item"""
    from .enumerable import Enumerable
    return Enumerable(lambda: (item for _ in range(count)))

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: ())

# --- sequence combinators ---

def unique(data: Iterable[T], key_selector: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
    """first element per distinct key, in original order"""
    source = from_iterable(data)
    return source._derive(lambda: _first_per_key(source, key_selector))

def zip_all(*sequences: Iterable[Any]) -> 'Enumerable[Tuple[Any, ...]]':
    """n-tuples pulled in lockstep, stopping at the shortest sequence"""
    return zip_sequences(*sequences)

def combinations(data: Iterable[T], k: int) -> 'Enumerable[Tuple[T, ...]]':
    """index-increasing k-subsets of a finite sequence, in lexicographic index order"""
    source = from_iterable(data)
    return source._derive(lambda: _combinations(source, k))

def cartesian_product(*sequences: Iterable[Any]) -> 'Enumerable[Tuple[Any, ...]]':
    """cross product in odometer order; no sequences gives one empty tuple"""
    return cartesian_sequences(*sequences)

def cycle(factory: Factory[T]) -> 'Enumerable[T]':
    """replay factory() lap after lap, forever"""
    return cycle_factory(factory)

# --- aliases ---
seq = from_iterable
S = from_iterable
