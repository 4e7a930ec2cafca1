from __future__ import annotations
import logging
import typing
from .iterators import pulling
from .pattern import Pattern, matches
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

logger = logging.getLogger(__name__)

# shared by every integers() call; the matcher keeps concurrent scans apart
INTEGER_PATTERN = Pattern(r'-?\d+')


def _split_segments(text: str, delimiter: str) -> Iterator[str]:
    if delimiter == '':
        yield from text
        return

    start = 0
    while True:
        end = text.find(delimiter, start)
        if end == -1:
            yield text[start:]
            return
        yield text[start:end]
        start = end + len(delimiter)


def split(text: str, delimiter: str) -> 'Enumerable[str]':
    """
    single-use sequence of the substrings between occurrences of delimiter,
    keeping leading and trailing empty segments like str.split(delimiter).
    an empty delimiter yields each character.
    """
    from .factories import from_iterator
    return from_iterator(_split_segments(text, delimiter))


def lines(text: str) -> 'Enumerable[str]':
    """single-use sequence of lines without their terminators"""
    from .factories import from_iterator

    def line_data():
        segments = _split_segments(text, '\n')
        pending = next(segments)
        for segment in segments:
            yield pending[:-1] if pending.endswith('\r') else pending
            pending = segment
        # a trailing newline does not open another line
        if pending:
            yield pending[:-1] if pending.endswith('\r') else pending

    return from_iterator(line_data())


def chars(text: str) -> 'Enumerable[str]':
    """restartable sequence of the characters of text"""
    from .enumerable import Enumerable
    return Enumerable(lambda: iter(text))


def extract(text: str, pattern: Union[Pattern, str], parser: Callable[[str], T]) -> 'Enumerable[T]':
    """
    restartable sequence of every match of pattern converted with parser.
    tokens the parser rejects are skipped rather than ending the scan.
    """
    from .enumerable import Enumerable

    def parsed_data():
        with pulling(matches(pattern, text)) as records:
            for record in records:
                token = record.whole
                try:
                    value = parser(token)
                except (ValueError, TypeError):
                    logger.debug(f"skipping malformed token {token!r} at offset {record.index}")
                    continue
                yield value

    return Enumerable(parsed_data)


def integers(text: str) -> 'Enumerable[int]':
    """restartable sequence of the signed integers found in text"""
    return extract(text, INTEGER_PATTERN, int)
