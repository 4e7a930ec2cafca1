from __future__ import annotations
import typing
from ..iterators import pulling, is_restartable
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def _first_per_key(iterable: Iterable[T], key_selector: Optional[KeySelector[T, K]]) -> Iterator[T]:
    # the seen set grows with the number of distinct keys, never with the input length
    seen = set()
    with pulling(iterable) as items:
        for item in items:
            key = item if key_selector is None else key_selector(item)
            if key not in seen:
                seen.add(key)
                yield item


class SetAccessor(Generic[T]):
    """set-like operations that stay lazy and keep the order of first appearance."""
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def distinct(self, key_selector: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """return the first element seen for each distinct key. preserves order of first appearance."""
        return self._enumerable._derive(lambda: _first_per_key(self._enumerable, key_selector))

    def concat(self, other: Iterable[T]) -> 'Enumerable[T]':
        """concatenate with another sequence, preserving all elements and order."""
        from ..enumerable import Enumerable
        def concat_data():
            with pulling(self._enumerable) as items:
                yield from items
            with pulling(other) as items:
                yield from items
        restartable = self._enumerable.restartable and is_restartable(other)
        return Enumerable(concat_data, restartable=restartable)
