from abc import ABC, abstractmethod
from contextlib import contextmanager
from .types import *


def close_iterator(iterator: Any) -> None:
    """close an iterator if it supports closing (generators, lazy iterators)"""
    close = getattr(iterator, 'close', None)
    if close is not None:
        close()


@contextmanager
def pulling(iterable: Iterable[T]) -> Iterator[Iterator[T]]:
    """
    scoped iteration: yields an iterator over the iterable and closes it on every
    exit path, so early returns and injected failures reach the source's cleanup.
    """
    iterator = iter(iterable)
    try:
        yield iterator
    finally:
        close_iterator(iterator)


def is_restartable(iterable: Iterable[Any]) -> bool:
    """
    true when iterating again starts over from the beginning.
    sequences that carry an explicit restartable tag are trusted;
    otherwise an object that is its own iterator is single-use.
    """
    tag = getattr(iterable, 'restartable', None)
    if tag is not None:
        return bool(tag)
    return iter(iterable) is not iterable


class LazyIterator(ABC, Generic[T]):
    """
    pull-based iterator with an explicit lifecycle.
    subclasses implement _advance() to produce the next element (raising
    stopiteration when exhausted) and _cleanup() to release shared state.
    cleanup runs exactly once: on exhaustion, on close(), or when a failure
    escapes a pull or is injected with throw().
    """

    def __init__(self):
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def __iter__(self) -> 'LazyIterator[T]':
        return self

    def __next__(self) -> T:
        if self._closed:
            raise StopIteration
        try:
            return self._advance()
        except BaseException:
            self.close()
            raise

    @abstractmethod
    def _advance(self) -> T:
        """produce the next element or raise stopiteration"""
        pass

    def _cleanup(self) -> None:
        pass

    def close(self) -> None:
        """terminate early; idempotent and synchronous"""
        if not self._closed:
            self._closed = True
            self._cleanup()

    def throw(self, typ, val=None, tb=None):
        """inject a failure at the current suspension point; cleanup runs before it propagates"""
        if val is None:
            val = typ() if isinstance(typ, type) else typ
        if tb is not None:
            val = val.with_traceback(tb)
        self.close()
        raise val

    def __enter__(self) -> 'LazyIterator[T]':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
