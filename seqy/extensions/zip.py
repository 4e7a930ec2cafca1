from __future__ import annotations
import typing
from ..iterators import close_iterator, is_restartable
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def _zip_shortest(iterables: Sequence[Iterable[Any]]) -> Iterator[Tuple[Any, ...]]:
    """one element from each input per step; stops as soon as any input runs out"""
    iterators = []
    try:
        for iterable in iterables:
            iterators.append(iter(iterable))
        if not iterators:
            return
        while True:
            row = []
            for iterator in iterators:
                try:
                    row.append(next(iterator))
                except StopIteration:
                    return
            yield tuple(row)
    finally:
        for iterator in iterators:
            close_iterator(iterator)


def zip_sequences(*iterables: Iterable[Any]) -> 'Enumerable[Tuple[Any, ...]]':
    """lazy n-tuples over any number of sequences, shortest input wins"""
    from ..enumerable import Enumerable
    restartable = all(is_restartable(iterable) for iterable in iterables)
    return Enumerable(lambda: _zip_shortest(iterables), restartable=restartable)


class ZipAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def zip(self, *others: Iterable[Any]) -> 'Enumerable[Tuple[Any, ...]]':
        """zip this sequence with others into tuples, stopping at the shortest"""
        return zip_sequences(self._enumerable, *others)

    def zip_with(self, other: Iterable[U], result_selector: Callable[[T, U], V]) -> 'Enumerable[V]':
        """zip two sequences with custom result selector"""
        return self.zip(other).select(lambda pair: result_selector(*pair))
