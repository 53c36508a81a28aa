from __future__ import annotations
import typing
from ..types import *
from ..checks import check_callable, check_iterable, check_optional_callable
from ..factories import as_enumerable

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, Grouping

class JoinAccessor(Generic[T]):
    """
    equality joins. the inner sequence is re-scanned for every outer element, so
    any key type works with any equality comparer.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def join(self, inner: Iterable[U], outer_key_selector: KeySelector[T, K],
             inner_key_selector: KeySelector[U, K],
             result_selector: Callable[[T, U], V],
             equality_comparer: Optional[EqualityComparer[K]] = None) -> 'Enumerable[V]':
        """inner join two sequences based on matching keys"""
        from ..enumerable import Enumerable
        check_iterable('inner', inner, 'join')
        check_callable('outer_key_selector', outer_key_selector, 'join')
        check_callable('inner_key_selector', inner_key_selector, 'join')
        check_callable('result_selector', result_selector, 'join')
        check_optional_callable('equality_comparer', equality_comparer, 'join')
        inner = as_enumerable(inner)
        matches = equality_comparer or default_equality
        def join_data():
            for outer_item in self._enumerable:
                outer_key = outer_key_selector(outer_item)
                for inner_item in inner:
                    if matches(outer_key, inner_key_selector(inner_item)):
                        yield result_selector(outer_item, inner_item)
        return Enumerable(join_data)

    def group_join(self, inner: Iterable[U], outer_key_selector: KeySelector[T, K],
                   inner_key_selector: KeySelector[U, K],
                   result_selector: Callable[[T, 'Grouping[K, U]'], V],
                   equality_comparer: Optional[EqualityComparer[K]] = None) -> 'Enumerable[V]':
        """
        pairs every outer element with the lazily filtered group of matching inner
        elements. outer elements without matches get an empty group.
        """
        from ..enumerable import Enumerable, Grouping
        check_iterable('inner', inner, 'group_join')
        check_callable('outer_key_selector', outer_key_selector, 'group_join')
        check_callable('inner_key_selector', inner_key_selector, 'group_join')
        check_callable('result_selector', result_selector, 'group_join')
        check_optional_callable('equality_comparer', equality_comparer, 'group_join')
        inner = as_enumerable(inner)
        matches = equality_comparer or default_equality

        def make_group(outer_key: K) -> 'Grouping[K, U]':
            def matching_data():
                for inner_item in inner:
                    if matches(outer_key, inner_key_selector(inner_item)):
                        yield inner_item
            return Grouping(outer_key, matching_data)

        def group_join_data():
            for outer_item in self._enumerable:
                yield result_selector(outer_item, make_group(outer_key_selector(outer_item)))
        return Enumerable(group_join_data)

    def cross_join(self, inner: Iterable[U]) -> 'Enumerable[Tuple[T, U]]':
        """cartesian product of two sequences"""
        from ..enumerable import Enumerable
        check_iterable('inner', inner, 'cross_join')
        inner = as_enumerable(inner)
        def cross_join_data():
            for outer_item in self._enumerable:
                for inner_item in inner:
                    yield outer_item, inner_item
        return Enumerable(cross_join_data)
