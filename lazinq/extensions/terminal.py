from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from itertools import zip_longest
from ..types import *
from ..checks import (
    check_callable, check_optional_callable, check_count, check_iterable
)
from ..exceptions import (
    EmptyInputError, TooManyMatchesError, IndexOutOfRangeError, DuplicateKeyError
)
from ..factories import as_enumerable

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class TerminalAccessor(Generic[T]):
    """immediate operators: each call walks the sequence before returning."""
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    # --- materializers ---

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._enumerable)

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary. keys must be unique."""
        check_callable('key_selector', key_selector, 'dict')
        check_optional_callable('value_selector', value_selector, 'dict')
        val_sel = value_selector if value_selector else lambda item: item
        result: Dict[K, V] = {}
        for item in self._enumerable:
            key = key_selector(item)
            if key in result:
                raise DuplicateKeyError(key)
            result[key] = val_sel(item)
        return result

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())

    # --- quantifiers ---

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        check_optional_callable('predicate', predicate, 'count')
        if predicate is None: return sum(1 for _ in self._enumerable)
        return sum(1 for x in self._enumerable if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition. stops at the first hit."""
        check_optional_callable('predicate', predicate, 'any')
        if predicate is None:
            return self._enumerable.iterate().advance() is not MISSING
        return any(predicate(x) for x in self._enumerable)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        check_callable('predicate', predicate, 'all')
        return all(predicate(x) for x in self._enumerable)

    def contains(self, element: T, equality_comparer: Optional[EqualityComparer[T]] = None) -> bool:
        """check whether the sequence holds an element equal to 'element'"""
        check_optional_callable('equality_comparer', equality_comparer, 'contains')
        matches = equality_comparer or default_equality
        return any(matches(item, element) for item in self._enumerable)

    # --- element access ---

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        check_optional_callable('predicate', predicate, 'first')
        for item in self._enumerable:
            if predicate is None or predicate(item): return item
        if predicate is None: raise EmptyInputError("sequence contains no elements")
        raise EmptyInputError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default_factory: DefaultFactory[T] = none_factory) -> Optional[T]:
        """get first element or the produced default"""
        check_optional_callable('predicate', predicate, 'first_or_default')
        check_callable('default_factory', default_factory, 'first_or_default')
        for item in self._enumerable:
            if predicate is None or predicate(item): return item
        return default_factory()

    def _find_last(self, predicate: Optional[Predicate[T]]) -> Any:
        result = MISSING
        for item in self._enumerable:
            if predicate is None or predicate(item):
                result = item
        return result

    def last(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get last element"""
        check_optional_callable('predicate', predicate, 'last')
        result = self._find_last(predicate)
        if result is MISSING:
            if predicate is None: raise EmptyInputError("sequence contains no elements")
            raise EmptyInputError("no element satisfies the condition")
        return result

    def last_or_default(self, predicate: Optional[Predicate[T]] = None,
                        default_factory: DefaultFactory[T] = none_factory) -> Optional[T]:
        """get last element or the produced default"""
        check_optional_callable('predicate', predicate, 'last_or_default')
        check_callable('default_factory', default_factory, 'last_or_default')
        result = self._find_last(predicate)
        return default_factory() if result is MISSING else result

    def _find_single(self, predicate: Optional[Predicate[T]], operation: str) -> Any:
        """the only matching element, MISSING if none. raises on a second match."""
        result = MISSING
        for item in self._enumerable:
            if predicate is None or predicate(item):
                if result is not MISSING:
                    raise TooManyMatchesError(f"sequence contains more than one matching element in '{operation}'")
                result = item
        return result

    def single(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get single element, erroring if not exactly one"""
        check_optional_callable('predicate', predicate, 'single')
        result = self._find_single(predicate, 'single')
        if result is MISSING: raise EmptyInputError("sequence contains no matching elements")
        return result

    def single_or_default(self, predicate: Optional[Predicate[T]] = None,
                          default_factory: DefaultFactory[T] = none_factory) -> Optional[T]:
        """get single element or the produced default, erroring on more than one"""
        check_optional_callable('predicate', predicate, 'single_or_default')
        check_callable('default_factory', default_factory, 'single_or_default')
        result = self._find_single(predicate, 'single_or_default')
        return default_factory() if result is MISSING else result

    def element_at(self, index: int) -> T:
        """get the element at a zero-based position"""
        check_count('index', index, 'element_at')
        for position, item in enumerate(self._enumerable):
            if position == index: return item
        raise IndexOutOfRangeError(f"index {index} is out of the range of the current sequence")

    def element_at_or_default(self, index: int,
                              default_factory: DefaultFactory[T] = none_factory) -> Optional[T]:
        """get the element at a zero-based position or the produced default"""
        check_count('index', index, 'element_at_or_default')
        check_callable('default_factory', default_factory, 'element_at_or_default')
        for position, item in enumerate(self._enumerable):
            if position == index: return item
        return default_factory()

    # --- folds ---

    def aggregate(self, accumulator: Accumulator[Any, T], seed: Any = MISSING) -> Any:
        """applies accumulator function over sequence (left fold)"""
        check_callable('accumulator', accumulator, 'aggregate')
        result = seed
        for item in self._enumerable:
            result = item if result is MISSING else accumulator(result, item)
        if result is MISSING: raise EmptyInputError("cannot aggregate empty sequence without seed")
        return result

    def sequence_equal(self, other: Iterable[T],
                       equality_comparer: Optional[EqualityComparer[T]] = None) -> bool:
        """same length and pairwise equal elements"""
        check_iterable('other', other, 'sequence_equal')
        check_optional_callable('equality_comparer', equality_comparer, 'sequence_equal')
        matches = equality_comparer or default_equality
        # use a sentinel object to distinguish the end of one side from a None item
        sentinel = object()
        for first, second in zip_longest(self._enumerable, as_enumerable(other), fillvalue=sentinel):
            if first is sentinel or second is sentinel or not matches(first, second):
                return False
        return True
