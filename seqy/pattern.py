from __future__ import annotations
import re
import typing
from contextlib import contextmanager
from .iterators import LazyIterator
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable


class Pattern:
    """
    a regular expression with a mutable scan cursor.
    in find-all mode every exec() continues from the cursor and moves it past the
    match, so every sequence built on the same pattern shares that position.
    in find-first mode exec() always searches from the start and never moves it.
    """

    def __init__(self, regex: Union[str, 're.Pattern[str]'], find_all: bool = True, flags: int = 0):
        if isinstance(regex, re.Pattern):
            if flags:
                raise ValueError("cannot pass flags with an already compiled pattern")
            self._regex = regex
        else:
            self._regex = re.compile(regex, flags)
        self._find_all = find_all
        self._cursor = 0

    @property
    def regex(self) -> 're.Pattern[str]':
        return self._regex

    @property
    def find_all(self) -> bool:
        return self._find_all

    @property
    def cursor(self) -> int:
        return self._cursor

    @cursor.setter
    def cursor(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"cursor must be an int, got {type(value).__name__}")
        if value < 0:
            raise ValueError("cursor cannot be negative")
        self._cursor = value

    def exec(self, text: str) -> Optional[MatchRecord]:
        """run one scan step. returns none (and rewinds the cursor to 0) when nothing is left."""
        if not self._find_all:
            match = self._regex.search(text)
            return MatchRecord.from_match(match) if match else None

        if self._cursor > len(text):
            self._cursor = 0
            return None

        match = self._regex.search(text, self._cursor)
        if match is None:
            self._cursor = 0
            return None

        # an empty match must still move the scan forward
        self._cursor = match.end() if match.end() > match.start() else match.end() + 1
        return MatchRecord.from_match(match)

    @contextmanager
    def scanning_from(self, position: int, restore: int) -> Iterator['Pattern']:
        """place the cursor at position for the duration of the block, then put it back at restore"""
        self.cursor = position
        try:
            yield self
        finally:
            self._cursor = restore

    def __repr__(self) -> str:
        mode = "all" if self._find_all else "first"
        return f"Pattern({self._regex.pattern!r}, find={mode}, cursor={self._cursor})"


def compile(regex: Union[str, 're.Pattern[str]'], find_all: bool = True, flags: int = 0) -> Pattern:
    """compile a stateful pattern"""
    return Pattern(regex, find_all=find_all, flags=flags)


class MatchIterator(LazyIterator[MatchRecord]):
    """
    one pass of repeated scanning over a text.
    keeps its own next cursor and only borrows the pattern's cursor for the
    duration of each exec() call, so the pattern is back at its origin whenever
    control is with the consumer.
    """

    def __init__(self, pattern: Pattern, text: str):
        super().__init__()
        self._pattern = pattern
        self._text = text
        self._origin: Optional[int] = None
        self._next: Optional[int] = None

    def _advance(self) -> MatchRecord:
        if self._origin is None:
            self._origin = self._pattern.cursor
            self._next = self._origin

        with self._pattern.scanning_from(self._next, restore=self._origin):
            record = self._pattern.exec(self._text)
            self._next = self._pattern.cursor

        if record is None:
            raise StopIteration
        if not self._pattern.find_all:
            # the same match would come back forever; end after this one
            self.close()
        return record

    def _cleanup(self) -> None:
        if self._origin is not None:
            self._pattern.cursor = self._origin


def matches(pattern: Union[Pattern, str, 're.Pattern[str]'], text: str) -> 'Enumerable[MatchRecord]':
    """
    restartable sequence of match records found by repeated scanning from the
    pattern's current cursor. each iteration is an independent pass.
    """
    from .enumerable import Enumerable
    if not isinstance(pattern, Pattern):
        pattern = Pattern(pattern)
    return Enumerable(lambda: MatchIterator(pattern, text), restartable=True)
