from __future__ import annotations
import typing
from itertools import chain, takewhile, dropwhile
from ..types import *
from ..checks import (
    check_callable, check_optional_callable, check_count, check_not_none, is_iterable
)
from ..exceptions import SelectorFailedError, InvalidTypeError

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, OrderedEnumerable

class _CoreOperations(Generic[T]):
    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from ..enumerable import Enumerable
        check_callable('predicate', predicate, 'where')
        def filter_data():
            for item in self:
                if predicate(item):
                    yield item
        # always return a base enumerable
        return Enumerable(filter_data)

    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        from ..enumerable import Enumerable
        check_callable('selector', selector, 'select')
        def map_data():
            for item in self:
                result = selector(item)
                if result is MISSING:
                    raise SelectorFailedError(item, f"the selector failed in 'select' on item: {item!r}.")
                yield result
        return Enumerable(map_data)

    def select_many(self: 'Enumerable[T]', selector: Selector[T, Iterable[U]]) -> 'Enumerable[U]':
        """project and flatten sequences"""
        from ..enumerable import Enumerable
        check_callable('selector', selector, 'select_many')
        def flat_map_data():
            for outer_item in self:
                inner_sequence = selector(outer_item)
                if inner_sequence is None or inner_sequence is MISSING:
                    raise SelectorFailedError(
                        outer_item, f"the selector failed in 'select_many' on item: {outer_item!r}.")
                if not is_iterable(inner_sequence):
                    raise SelectorFailedError(
                        outer_item, f"the selector failed in 'select_many' on item: {outer_item!r}. "
                                    "the selector did not return an iterable collection.")
                for inner_item in inner_sequence:
                    if inner_item is MISSING:
                        raise SelectorFailedError(
                            outer_item, f"the selector failed in 'select_many' on item: {outer_item!r}. "
                                        "the selector returned a collection with missing elements.")
                    yield inner_item
        return Enumerable(flat_map_data)

    def select_with_index(self: 'Enumerable[T]', selector: Callable[[T, int], U]) -> 'Enumerable[U]':
        """project each element to a new form, using the element's index"""
        from ..enumerable import Enumerable
        check_callable('selector', selector, 'select_with_index')
        def map_with_index_data():
            for index, item in enumerate(self):
                result = selector(item, index)
                if result is MISSING:
                    raise SelectorFailedError(
                        item, f"the selector failed in 'select_with_index' on item {index}: {item!r}.")
                yield result
        return Enumerable(map_with_index_data)

    def _as_unordered(self: 'Enumerable[T]') -> 'Enumerable[T]':
        # a new primary sort starts from the flat sequence, not from earlier partitions
        from ..ordering import PartitionSource
        from ..enumerable import Enumerable
        return Enumerable(self) if isinstance(self, PartitionSource) else self

    def order_by(self: 'Enumerable[T]', key_selector: Callable[[T], K],
                 comparer: Optional[Comparer[K]] = None) -> 'OrderedEnumerable[T]':
        """sort elements by a key"""
        from ..enumerable import OrderedEnumerable
        check_callable('key_selector', key_selector, 'order_by')
        check_optional_callable('comparer', comparer, 'order_by')
        return OrderedEnumerable(self._as_unordered(), key_selector, comparer or default_comparer)

    def order_by_descending(self: 'Enumerable[T]', key_selector: Callable[[T], K],
                            comparer: Optional[Comparer[K]] = None) -> 'OrderedEnumerable[T]':
        """sort elements by a key in descending order"""
        from ..enumerable import OrderedEnumerable
        check_callable('key_selector', key_selector, 'order_by_descending')
        check_optional_callable('comparer', comparer, 'order_by_descending')
        return OrderedEnumerable(self._as_unordered(), key_selector, reverse_comparer(comparer or default_comparer))

    def then_by(self: 'Enumerable[T]', key_selector: Callable[[T], K],
                comparer: Optional[Comparer[K]] = None) -> 'OrderedEnumerable[T]':
        raise InvalidTypeError("then_by requires an ordered enumerable. use order_by() first.")

    def then_by_descending(self: 'Enumerable[T]', key_selector: Callable[[T], K],
                           comparer: Optional[Comparer[K]] = None) -> 'OrderedEnumerable[T]':
        raise InvalidTypeError("then_by_descending requires an ordered enumerable. use order_by() first.")

    def as_ordered(self: 'Enumerable[T]') -> 'OrderedEnumerable[T]':
        """
        treats the current sequence as already ordered, allowing 'then_by' to be called.
        this does not perform a sort. use it only when the source is pre-sorted.
        """
        from ..enumerable import OrderedEnumerable
        # a constant key leaves a single partition in its original order
        return OrderedEnumerable(self, lambda item: None, lambda first, second: 0)

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements"""
        from ..enumerable import Enumerable
        check_count('count', count, 'take')
        def take_data():
            if count == 0:
                return
            taken = 0
            for item in self:
                yield item
                taken += 1
                # stop before pulling again, infinite upstreams depend on it
                if taken >= count:
                    return
        return Enumerable(take_data)

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        from ..enumerable import Enumerable
        check_count('count', count, 'skip')
        def skip_data():
            for index, item in enumerate(self):
                if index >= count:
                    yield item
        return Enumerable(skip_data)

    def take_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """take elements while predicate is true"""
        from ..enumerable import Enumerable
        check_callable('predicate', predicate, 'take_while')
        def take_while_data():
            yield from takewhile(predicate, self)
        return Enumerable(take_while_data)

    def skip_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """skip elements while predicate is true"""
        from ..enumerable import Enumerable
        check_callable('predicate', predicate, 'skip_while')
        def skip_while_data():
            yield from dropwhile(predicate, self)
        return Enumerable(skip_while_data)

    def reverse(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """inverts the order of the elements in a sequence"""
        from ..enumerable import Enumerable
        def reverse_data():
            yield from reversed(list(self))
        return Enumerable(reverse_data)

    def append(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """appends a value to the end of the sequence"""
        from ..enumerable import Enumerable
        def append_data():
            yield from chain(self, [element])
        return Enumerable(append_data)

    def prepend(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """adds a value to the beginning of the sequence"""
        from ..enumerable import Enumerable
        def prepend_data():
            yield from chain([element], self)
        return Enumerable(prepend_data)

    def default_if_empty(self: 'Enumerable[T]',
                         default_factory: DefaultFactory[T] = none_factory) -> 'Enumerable[T]':
        """
        returns the elements of a sequence, or a single produced default if the
        sequence is empty. wrap literals: default_if_empty(lambda: 0)
        """
        from ..enumerable import Enumerable
        check_callable('default_factory', default_factory, 'default_if_empty')
        def default_data():
            has_elements = False
            for item in self:
                has_elements = True
                yield item
            if not has_elements:
                yield default_factory()
        return Enumerable(default_data)

    def of_type(self: 'Enumerable[T]', type_filter: Type[U]) -> 'Enumerable[U]':
        """filters the elements of a sequence based on a specified type"""
        check_not_none('type_filter', type_filter, 'of_type')
        if not isinstance(type_filter, (type, tuple)):
            raise InvalidTypeError(f"argument 'type_filter' must be a type in 'of_type', got {type_filter!r}.")
        return self.where(lambda item: isinstance(item, type_filter))
