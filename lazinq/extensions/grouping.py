from __future__ import annotations
import typing
from ..types import *
from ..checks import check_callable, check_optional_callable, check_count
from ..exceptions import ArgumentOutOfRangeError
from .set import _SeenItems

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, Grouping

class GroupingAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def group_by(self, key_selector: KeySelector[T, K],
                 equality_comparer: Optional[EqualityComparer[K]] = None,
                 element_selector: Optional[Selector[T, U]] = None) -> 'Enumerable[Grouping[K, U]]':
        """
        one grouping per distinct key, in order of first occurrence. a grouping does
        not hold its members: each iteration re-scans the source and keeps the items
        whose key matches, so groups always reflect the current source.
        """
        from ..enumerable import Enumerable, Grouping
        check_callable('key_selector', key_selector, 'group_by')
        check_optional_callable('equality_comparer', equality_comparer, 'group_by')
        check_optional_callable('element_selector', element_selector, 'group_by')
        source = self._enumerable
        matches = equality_comparer or default_equality
        project = element_selector or (lambda item: item)

        def make_group(key: K) -> 'Grouping[K, U]':
            def group_data():
                for item in source:
                    if matches(key_selector(item), key):
                        yield project(item)
            return Grouping(key, group_data)

        def groups_data():
            seen_keys = _SeenItems(equality_comparer)
            for item in source:
                key = key_selector(item)
                if seen_keys.add_new(key):
                    yield make_group(key)
        return Enumerable(groups_data)

    def chunk(self, size: int) -> 'Enumerable[List[T]]':
        """split into consecutive lists of at most 'size' items"""
        from ..enumerable import Enumerable
        check_count('size', size, 'chunk')
        if size == 0:
            raise ArgumentOutOfRangeError("chunk size must be positive")
        def chunk_data():
            current = []
            for item in self._enumerable:
                current.append(item)
                if len(current) == size:
                    yield current
                    current = []
            if current:
                yield current
        return Enumerable(chunk_data)

    def batch_by(self, key_selector: KeySelector[T, K],
                 equality_comparer: Optional[EqualityComparer[K]] = None) -> 'Enumerable[List[T]]':
        """batch consecutive elements with same key"""
        from ..enumerable import Enumerable
        check_callable('key_selector', key_selector, 'batch_by')
        check_optional_callable('equality_comparer', equality_comparer, 'batch_by')
        matches = equality_comparer or default_equality
        def batch_data():
            current_batch, current_key = [], MISSING
            for item in self._enumerable:
                item_key = key_selector(item)
                if current_batch and matches(current_key, item_key):
                    current_batch.append(item)
                else:
                    if current_batch:
                        yield current_batch
                    current_batch, current_key = [item], item_key
            if current_batch:
                yield current_batch
        return Enumerable(batch_data)
