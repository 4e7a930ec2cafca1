from __future__ import annotations
import logging
import typing
from ..iterators import pulling
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)


def _laps(factory: Factory[T]) -> Iterator[T]:
    """replay a fresh sequence from factory, lap after lap"""
    lap = 0
    while True:
        lap += 1
        logger.debug(f"starting lap {lap}")
        produced = False
        with pulling(factory()) as items:
            for item in items:
                produced = True
                yield item
        if not produced:
            # an empty lap would repeat forever without producing anything
            logger.debug(f"lap {lap} was empty, ending cycle")
            return


def cycle_factory(factory: Factory[T]) -> 'Enumerable[T]':
    """
    unbounded sequence that calls factory for every lap.
    takes a factory rather than a sequence because most sequences are
    single-use and would stop producing after the first lap.
    """
    from ..enumerable import Enumerable
    return Enumerable(lambda: _laps(factory), restartable=True)


class UtilityAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def cycle(self) -> 'Enumerable[T]':
        """
        replays this sequence indefinitely. only restartable sequences can be cycled;
        for anything else, pass a factory to seqy.cycle instead.
        """
        if not self._enumerable.restartable:
            raise TypeError("cannot cycle a single-use sequence; pass a factory to cycle() instead")
        return cycle_factory(lambda: self._enumerable)

    def for_each(self, action: Callable[[T], Any]) -> 'Enumerable[T]':
        """
        performs the specified action on each element of a sequence for side-effects.
        this is an EAGER operation that executes immediately.
        returns the original enumerable to allow chaining.
        """
        with pulling(self._enumerable) as items:
            for item in items:
                action(item)
        return self._enumerable

    def side_effect(self, action: Callable[[T], Any]) -> 'Enumerable[T]':
        """
        performs a side-effect action for each element as it passes through the sequence
        without modifying it. lazy, so it shows exactly which elements get pulled.
        example: .where(...).util.side_effect(print).select(...)
        """
        def side_effect_data():
            with pulling(self._enumerable) as items:
                for item in items:
                    action(item)
                    yield item
        return self._enumerable._derive(side_effect_data)

    def pipe(self, func: Callable[..., U], *args, **kwargs) -> U:
        """
        pipes the enumerable object into an external function. enables custom, chainable operations.
        example: .util.pipe(solve, part=2)
        """
        return func(self._enumerable, *args, **kwargs)
