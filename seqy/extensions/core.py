from __future__ import annotations
import typing
from ..iterators import pulling
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class _CoreOperations(Generic[T]):
    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        def filter_data():
            with pulling(self) as items:
                for item in items:
                    if predicate(item):
                        yield item
        return self._derive(filter_data)

    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        def map_data():
            with pulling(self) as items:
                for item in items:
                    yield selector(item)
        return self._derive(map_data)

    def select_many(self: 'Enumerable[T]', selector: Selector[T, Iterable[U]]) -> 'Enumerable[U]':
        """project and flatten sequences"""
        def flat_map_data():
            with pulling(self) as items:
                for item in items:
                    with pulling(selector(item)) as inner:
                        yield from inner
        return self._derive(flat_map_data)

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements, closing the source once they are produced"""
        def take_data():
            if count <= 0:
                return
            with pulling(self) as items:
                for taken, item in enumerate(items, start=1):
                    yield item
                    if taken >= count:
                        return
        return self._derive(take_data)

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        def skip_data():
            with pulling(self) as items:
                for index, item in enumerate(items):
                    if index >= count:
                        yield item
        return self._derive(skip_data)

    def take_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """take elements while predicate is true"""
        def take_while_data():
            with pulling(self) as items:
                for item in items:
                    if not predicate(item):
                        return
                    yield item
        return self._derive(take_while_data)

    def skip_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """skip elements while predicate is true"""
        def skip_while_data():
            skipping = True
            with pulling(self) as items:
                for item in items:
                    if skipping and predicate(item):
                        continue
                    skipping = False
                    yield item
        return self._derive(skip_while_data)

    def scan(self: 'Enumerable[T]', accumulator: Accumulator[U, T], seed: U) -> 'Enumerable[U]':
        """
        running accumulation: yields the seed, then the accumulated value after each element.
        works on infinite sequences since every value is produced on demand.
        """
        def scan_data():
            total = seed
            yield total
            with pulling(self) as items:
                for item in items:
                    total = accumulator(total, item)
                    yield total
        return self._derive(scan_data)

    def append(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """appends a value to the end of the sequence"""
        def append_data():
            with pulling(self) as items:
                yield from items
            yield element
        return self._derive(append_data)

    def prepend(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """adds a value to the beginning of the sequence"""
        def prepend_data():
            yield element
            with pulling(self) as items:
                yield from items
        return self._derive(prepend_data)
