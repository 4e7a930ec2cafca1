from __future__ import annotations
import typing
import math
from ..iterators import pulling, is_restartable
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def _combinations(iterable: Iterable[T], k: int) -> Iterator[Tuple[T, ...]]:
    # the pool is read once, on the first pull
    pool = tuple(iterable)

    def pick(start: int, remaining: int) -> Iterator[Tuple[T, ...]]:
        if remaining == 0:
            yield ()
            return
        # leave room for the picks still to come
        for index in range(start, len(pool) - remaining + 1):
            for rest in pick(index + 1, remaining - 1):
                yield (pool[index],) + rest

    if k >= 0:
        yield from pick(0, k)


def _product(head: Iterable[Any], tails: List[Iterable[Any]]) -> Iterator[Tuple[Any, ...]]:
    with pulling(head) as items:
        for item in items:
            if not tails:
                yield (item,)
                continue
            for rest in _product(tails[0], tails[1:]):
                yield (item,) + rest


def _cartesian(iterables: Sequence[Iterable[Any]]) -> Iterator[Tuple[Any, ...]]:
    if not iterables:
        yield ()
        return
    head, *tails = iterables
    # tails are walked once per head element, so single-use ones are read into memory first
    tails = [tail if is_restartable(tail) else tuple(tail) for tail in tails]
    yield from _product(head, tails)


def cartesian_sequences(*iterables: Iterable[Any]) -> 'Enumerable[Tuple[Any, ...]]':
    """lazy cross product in odometer order (rightmost input varies fastest)"""
    from ..enumerable import Enumerable
    restartable = all(is_restartable(iterable) for iterable in iterables)
    return Enumerable(lambda: _cartesian(iterables), restartable=restartable)


class CombinatoricsAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def binomial_coefficient(self, k: int) -> int:
        """binomial coefficient n choose k, using python's optimized math.comb"""
        n = self._enumerable.to.count()
        # math.comb raises valueerror for k < 0. return 0 for consistency.
        if k < 0:
            return 0
        return math.comb(n, k)

    def combinations(self, k: int) -> 'Enumerable[Tuple[T, ...]]':
        """
        all index-increasing k-subsets in lexicographic index order.
        the source must be finite; it is materialized once per pass.
        k = 0 yields one empty tuple, k > n and k < 0 yield nothing.
        """
        return self._enumerable._derive(lambda: _combinations(self._enumerable, k))

    def cartesian_product(self, *others: Iterable[Any]) -> 'Enumerable[Tuple[Any, ...]]':
        """
        computes the cartesian product with other iterables.
        this sequence is streamed; the others are replayed for each of its elements.
        """
        return cartesian_sequences(self._enumerable, *others)
