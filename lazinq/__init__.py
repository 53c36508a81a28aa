"""
   __
  / /  ___ _____(_)__  ___ _
 / /__/ _ `/_ / / / _ \/ _ `/
/____/\_,_//__/_/_//_/\_, /
                       /_/
lazy, restartable, linq-style queries over python iterables.
"""
import logging

# expose the main classes
from .enumerable import Enumerable, OrderedEnumerable, Grouping, Cursor

# expose the factory functions
from .factories import (
    from_iterable,
    as_enumerable,
    from_range,
    repeat,
    empty,
    generate,
    lazinq,
    P,
    p,
)

# expose supporting types and policies
from .types import (
    MISSING,
    ReplayBuffer,
    default_equality,
    default_comparer,
)

from .exceptions import (
    QueryError,
    MissingArgumentError,
    InvalidTypeError,
    InvalidConstructionError,
    ArgumentOutOfRangeError,
    InvalidOperationError,
    EmptyInputError,
    TooManyMatchesError,
    SelectorFailedError,
    IndexOutOfRangeError,
    DuplicateKeyError,
    ArithmeticOverflowError,
    InvalidNumericError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Enumerable",
    "OrderedEnumerable",
    "Grouping",
    "Cursor",
    "from_iterable",
    "as_enumerable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "lazinq",
    "P",
    "p",
    "MISSING",
    "ReplayBuffer",
    "default_equality",
    "default_comparer",
    "QueryError",
    "MissingArgumentError",
    "InvalidTypeError",
    "InvalidConstructionError",
    "ArgumentOutOfRangeError",
    "InvalidOperationError",
    "EmptyInputError",
    "TooManyMatchesError",
    "SelectorFailedError",
    "IndexOutOfRangeError",
    "DuplicateKeyError",
    "ArithmeticOverflowError",
    "InvalidNumericError",
]
