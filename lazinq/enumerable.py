from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator as _IteratorABC
from .types import *
from .checks import (
    check_callable, check_optional_callable, is_iterable, is_generator_function
)
from .exceptions import MissingArgumentError, InvalidConstructionError, InvalidTypeError
from .ordering import PartitionSource, UnorderedPartitions, PartitionCursor

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.join import JoinAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.stats import StatsAccessor
from .extensions.utility import UtilityAccessor
from .extensions.terminal import TerminalAccessor
from .extensions.zip import ZipAccessor

logger = logging.getLogger(__name__)

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def iterate(self) -> 'Cursor[T]':
        """start a fresh traversal"""
        pass

# --- cursor ---

class Cursor(Iterator[T]):
    """
    single-use pull handle over one traversal of an enumerable.
    the factory is not invoked until the first pull, and once the cursor reports
    exhaustion it keeps doing so.
    """

    def __init__(self, factory: Callable[[], Iterable[T]]):
        self._factory = factory
        self._inner: Optional[Iterator[T]] = None
        self._exhausted = False

    def advance(self) -> Any:
        """return the next value, or MISSING once the traversal is over"""
        if self._exhausted:
            return MISSING
        if self._inner is None:
            self._inner = iter(self._factory())
        try:
            return next(self._inner)
        except StopIteration:
            self._exhausted = True
            self._inner = None
            return MISSING

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __next__(self) -> T:
        item = self.advance()
        if item is MISSING:
            raise StopIteration
        return item

    def __iter__(self) -> 'Cursor[T]':
        return self

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, source: Union[Callable[[], Iterator[T]], Iterable[T]],
                 predicate: Optional[Predicate[T]] = None):
        """
        init from a generator function (the lazy factory), or from an iterable source
        filtered by an optional inclusion predicate. nothing is pulled here.
        """
        if source is None:
            raise MissingArgumentError(
                "enumerable requires a generator function or an iterable source.")

        if is_iterable(source):
            check_optional_callable('predicate', predicate, 'Enumerable')
            self._data_func = self._source_factory(source, predicate)
        elif callable(source):
            if not is_generator_function(source):
                raise InvalidConstructionError(
                    "enumerable requires a generator function as factory, "
                    f"got {getattr(source, '__name__', type(source).__name__)}.")
            if predicate is not None:
                raise InvalidConstructionError("a predicate can only be combined with an iterable source.")
            self._data_func = source
        else:
            raise MissingArgumentError(
                "enumerable requires a generator function or an iterable source, "
                f"got {type(source).__name__}.")

    @staticmethod
    def _source_factory(source: Iterable[T], predicate: Optional[Predicate[T]]) -> Callable[[], Iterator[T]]:
        if isinstance(source, _IteratorABC):
            # one-shot iterators are replayed from a cache so that re-iteration works
            items = ReplayBuffer(lambda: source).replay
        else:
            items = lambda: source

        def source_data():
            for item in items():
                if predicate is None or predicate(item):
                    yield item
        return source_data

    def iterate(self) -> Cursor[T]:
        return Cursor(self._data_func)

    def __iter__(self) -> Iterator[T]:
        return self.iterate()

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a lazy, restartable, linq-inspired sequence over any python iterable."""
    def __init__(self, source: Union[Callable[[], Iterator[T]], Iterable[T]],
                 predicate: Optional[Predicate[T]] = None):
        super().__init__(source, predicate)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.join = JoinAccessor(self)
        self.zip = ZipAccessor(self)
        self.group = GroupingAccessor(self)
        self.stats = StatsAccessor(self)
        self.util = UtilityAccessor(self)
        self.to = TerminalAccessor(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({getattr(self._data_func, '__name__', 'factory')})"

# --- grouping ---

class Grouping(Enumerable[T], Generic[K, T]):
    """an enumerable carrying the key its elements were grouped under."""

    def __init__(self, key: K, data_func: Callable[[], Iterator[T]]):
        super().__init__(data_func)
        self._key = key

    @property
    def key(self) -> K:
        return self._key

    def __repr__(self) -> str:
        return f"Grouping(key={self._key!r})"

# --- ordered enumerable class ---

class OrderedEnumerable(Enumerable[T], PartitionSource[T]):
    """
    a sorted sequence that allows subsequent orderings. each instance adds one sort
    level on top of its upstream and never modifies it.
    """

    def __init__(self, source: Union['OrderedEnumerable[T]', Iterable[T]],
                 key_selector: KeySelector[T, K], comparer: Comparer[K]):
        if source is None:
            raise MissingArgumentError("argument 'source' must not be None in 'OrderedEnumerable'.")
        if not is_iterable(source):
            raise InvalidTypeError(
                f"argument 'source' must be iterable in 'OrderedEnumerable', got {type(source).__name__}.")
        check_callable('key_selector', key_selector, 'OrderedEnumerable')
        check_callable('comparer', comparer, 'OrderedEnumerable')

        if isinstance(source, PartitionSource):
            self._upstream = source
        else:
            if not isinstance(source, Enumerable):
                source = Enumerable(source)
            self._upstream = UnorderedPartitions(source)
        self._key_selector = key_selector
        self._comparer = comparer
        super().__init__(self._flatten)

    def partitions(self) -> Iterator[Iterator[T]]:
        """outer cursor over the partitions of this level, each an inner cursor"""
        return PartitionCursor(self._upstream, self._key_selector, self._comparer)

    def _flatten(self) -> Iterator[T]:
        for partition in self.partitions():
            yield from partition

    def then_by(self, key_selector: KeySelector[T, K],
                comparer: Optional[Comparer[K]] = None) -> 'OrderedEnumerable[T]':
        """secondary sort ascending"""
        check_callable('key_selector', key_selector, 'then_by')
        check_optional_callable('comparer', comparer, 'then_by')
        return OrderedEnumerable(self, key_selector, comparer or default_comparer)

    def then_by_descending(self, key_selector: KeySelector[T, K],
                           comparer: Optional[Comparer[K]] = None) -> 'OrderedEnumerable[T]':
        """secondary sort descending"""
        check_callable('key_selector', key_selector, 'then_by_descending')
        check_optional_callable('comparer', comparer, 'then_by_descending')
        return OrderedEnumerable(self, key_selector, reverse_comparer(comparer or default_comparer))
