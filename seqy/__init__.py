r"""
'    ______ ______  ______ __  __
'   /  ___//  __  \/  __  \  \/  /
'   \___ \ |  ____/  /_/  /\    /
'  /____  \ \_____\___    \ /  /
'       \_/          \____//__/
"""

# expose the main classes
from .enumerable import Enumerable
from .iterators import LazyIterator, pulling, close_iterator, is_restartable

# expose the stateful matcher
from .pattern import Pattern, MatchIterator, compile, matches

# expose the text sources
from .text import split, lines, chars, extract, integers

# expose the factory functions
from .factories import (
    from_iterable,
    from_iterator,
    from_factory,
    from_range,
    repeat,
    empty,
    unique,
    zip_all,
    combinations,
    cartesian_product,
    cycle,
    seq,
    S
)

# expose supporting data classes
from .types import (
    MatchRecord,
    NoSolutionError
)

# define what `import *` does
__all__ = [
    "Enumerable",
    "LazyIterator",
    "pulling",
    "close_iterator",
    "is_restartable",
    "Pattern",
    "MatchIterator",
    "compile",
    "matches",
    "split",
    "lines",
    "chars",
    "extract",
    "integers",
    "from_iterable",
    "from_iterator",
    "from_factory",
    "from_range",
    "repeat",
    "empty",
    "unique",
    "zip_all",
    "combinations",
    "cartesian_product",
    "cycle",
    "seq",
    "S",
    "MatchRecord",
    "NoSolutionError"
]
