from __future__ import annotations
import typing
from itertools import chain
from ..types import *
from ..checks import check_iterable, check_optional_callable
from ..factories import as_enumerable

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _SeenItems(Generic[T]):
    """
    membership store for the set operators. with the default equality, hashable
    items go into a set and unhashable ones fall back to a list scan. a custom
    comparer always uses the pairwise list scan.
    """

    def __init__(self, equality_comparer: Optional[EqualityComparer[T]] = None):
        self._comparer = equality_comparer
        self._hashed: Set[Any] = set()
        self._scanned: List[T] = []

    def __contains__(self, item: T) -> bool:
        if self._comparer is None:
            try:
                return item in self._hashed
            except TypeError:
                return any(default_equality(seen, item) for seen in self._scanned)
        return any(self._comparer(seen, item) for seen in self._scanned)

    def add(self, item: T) -> None:
        if self._comparer is None:
            try:
                self._hashed.add(item)
                return
            except TypeError:
                pass
        self._scanned.append(item)

    def add_new(self, item: T) -> bool:
        """add the item unless an equal one is present. true if it was added."""
        if item in self:
            return False
        self.add(item)
        return True


class SetAccessor(Generic[T]):
    """
    set-theoretic operations. every operator preserves the order of first
    appearance and accepts an optional equality comparer (first, second) -> bool.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def distinct(self, equality_comparer: Optional[EqualityComparer[T]] = None) -> 'Enumerable[T]':
        """return distinct elements. preserves order of first appearance."""
        from ..enumerable import Enumerable
        check_optional_callable('equality_comparer', equality_comparer, 'distinct')
        def distinct_data():
            seen = _SeenItems(equality_comparer)
            for item in self._enumerable:
                if seen.add_new(item):
                    yield item
        return Enumerable(distinct_data)

    def union(self, other: Iterable[T],
              equality_comparer: Optional[EqualityComparer[T]] = None) -> 'Enumerable[T]':
        """return the order-preserving union of two sequences (distinct elements)."""
        from ..enumerable import Enumerable
        check_iterable('other', other, 'union')
        other = as_enumerable(other)
        check_optional_callable('equality_comparer', equality_comparer, 'union')
        def union_data():
            seen = _SeenItems(equality_comparer)
            for item in chain(self._enumerable, other):
                if seen.add_new(item):
                    yield item
        return Enumerable(union_data)

    def intersect(self, other: Iterable[T],
                  equality_comparer: Optional[EqualityComparer[T]] = None) -> 'Enumerable[T]':
        """return the distinct elements of this sequence that also occur in the other."""
        from ..enumerable import Enumerable
        check_iterable('other', other, 'intersect')
        other = as_enumerable(other)
        check_optional_callable('equality_comparer', equality_comparer, 'intersect')
        def intersect_data():
            other_items = _SeenItems(equality_comparer)
            for item in other:
                other_items.add(item)
            yielded = _SeenItems(equality_comparer)
            for item in self._enumerable:
                if item in other_items and yielded.add_new(item):
                    yield item
        return Enumerable(intersect_data)

    def except_(self, other: Iterable[T],
                equality_comparer: Optional[EqualityComparer[T]] = None) -> 'Enumerable[T]':
        """
        return distinct elements from the first sequence not in the second (set difference).
        duplicates in the first sequence are dropped too: [1, 1, 2] except [2] gives [1].
        use where(lambda x: x not in ...) to keep them.
        """
        from ..enumerable import Enumerable
        check_iterable('other', other, 'except_')
        other = as_enumerable(other)
        check_optional_callable('equality_comparer', equality_comparer, 'except_')
        def except_data():
            excluded = _SeenItems(equality_comparer)
            for item in other:
                excluded.add(item)
            # once yielded, an item also excludes its later duplicates
            for item in self._enumerable:
                if excluded.add_new(item):
                    yield item
        return Enumerable(except_data)

    def symmetric_difference(self, other: Iterable[T],
                             equality_comparer: Optional[EqualityComparer[T]] = None) -> 'Enumerable[T]':
        """return elements that are in one sequence or the other, but not both."""
        from ..enumerable import Enumerable
        check_iterable('other', other, 'symmetric_difference')
        other = as_enumerable(other)
        check_optional_callable('equality_comparer', equality_comparer, 'symmetric_difference')
        def symmetric_difference_data():
            self_data = list(self._enumerable)
            other_data = list(other)
            self_items, other_items = _SeenItems(equality_comparer), _SeenItems(equality_comparer)
            for item in self_data:
                self_items.add(item)
            for item in other_data:
                other_items.add(item)
            yielded = _SeenItems(equality_comparer)
            for item in self_data:
                if item not in other_items and yielded.add_new(item):
                    yield item
            for item in other_data:
                if item not in self_items and yielded.add_new(item):
                    yield item
        return Enumerable(symmetric_difference_data)

    def concat(self, other: Iterable[T]) -> 'Enumerable[T]':
        """concatenate with another sequence, preserving all elements and order."""
        from ..enumerable import Enumerable
        check_iterable('other', other, 'concat')
        other = as_enumerable(other)
        def concat_data():
            yield from self._enumerable
            yield from other
        return Enumerable(concat_data)

    # --- boolean set checks ---

    def is_subset_of(self, other: Iterable[T],
                     equality_comparer: Optional[EqualityComparer[T]] = None) -> bool:
        """determines whether every element of this sequence occurs in another."""
        check_iterable('other', other, 'is_subset_of')
        other = as_enumerable(other)
        check_optional_callable('equality_comparer', equality_comparer, 'is_subset_of')
        other_items = _SeenItems(equality_comparer)
        for item in other:
            other_items.add(item)
        return all(item in other_items for item in self._enumerable)

    def is_superset_of(self, other: Iterable[T],
                       equality_comparer: Optional[EqualityComparer[T]] = None) -> bool:
        """determines whether this sequence contains every element of another."""
        from ..factories import from_iterable
        check_iterable('other', other, 'is_superset_of')
        return from_iterable(other).set.is_subset_of(self._enumerable, equality_comparer)
