import logging as _logging
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[K, K], int]
EqualityComparer = Callable[[T, T], bool]
Accumulator = Callable[[U, T], U]
DefaultFactory = Callable[[], T]

_logger = _logging.getLogger(__name__)


class _Missing:
    """the 'no value' marker. never yielded by a sequence."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def default_equality(first: Any, second: Any) -> bool:
    """equality policy used when the caller supplies none"""
    return first == second


def default_comparer(first: Any, second: Any) -> int:
    """three-way comparison using the native < and > operators"""
    if first < second:
        return -1
    if first > second:
        return 1
    return 0


def reverse_comparer(comparer: Comparer) -> Comparer:
    """sign-inverts a three-way comparer"""
    def reversed_compare(first, second) -> int:
        return -comparer(first, second)
    return reversed_compare


def none_factory() -> None:
    return None


class ReplayBuffer(Generic[T]):
    """
    caches a one-shot iterator as it is consumed so that every traversal can
    replay it from the start. items are pulled from the source only when a
    traversal reaches past the cached prefix, so infinite sources stay usable.
    """

    def __init__(self, source_func: Callable[[], Iterable[T]]):
        self._source_func = source_func
        self._cache: List[T] = []
        self._source_iterator: Optional[Iterator[T]] = None
        self._is_fully_enumerated = False
        self._error: Optional[BaseException] = None

    def _get_iterator(self) -> Iterator[T]:
        """get or create the source iterator"""
        if self._source_iterator is None:
            self._source_iterator = iter(self._source_func())
        return self._source_iterator

    def _materialize_next(self) -> bool:
        """pull one more item into the cache. false once the source is drained."""
        if self._is_fully_enumerated:
            return False
        # a failed source stays failed for every later traversal
        if self._error is not None:
            raise self._error
        try:
            self._cache.append(next(self._get_iterator()))
            return True
        except StopIteration:
            self._is_fully_enumerated = True
            self._source_iterator = None
            _logger.debug(f"replay buffer complete after {len(self._cache)} items")
            return False
        except Exception as e:
            self._error = e
            self._source_iterator = None
            _logger.debug(f"replay buffer source failed after {len(self._cache)} items: {e!r}")
            raise

    def replay(self) -> Iterator[T]:
        # index based, so interleaved traversals each see the full sequence
        index = 0
        while index < len(self._cache) or self._materialize_next():
            yield self._cache[index]
            index += 1

    @property
    def cached_count(self) -> int:
        return len(self._cache)

    @property
    def is_complete(self) -> bool:
        return self._is_fully_enumerated

    def __repr__(self) -> str:
        return f"ReplayBuffer(cached={len(self._cache)}, complete={self._is_fully_enumerated})"
