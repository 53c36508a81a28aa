from __future__ import annotations
import typing
from ..types import *
from ..checks import check_callable, check_iterable
from ..factories import as_enumerable

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class ZipAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def zip_with(self, other: Iterable[U], result_selector: Callable[[T, U], V]) -> 'Enumerable[V]':
        """pair items position by position, stopping at the end of the shorter sequence"""
        from ..enumerable import Enumerable
        check_iterable('other', other, 'zip_with')
        check_callable('result_selector', result_selector, 'zip_with')
        other = as_enumerable(other)
        def zip_data():
            for first, second in zip(self._enumerable, other):
                yield result_selector(first, second)
        return Enumerable(zip_data)

    def zip_longest_with(self, other: Iterable[U],
                         result_selector: Callable[[Optional[T], Optional[U]], V],
                         default_self: DefaultFactory[T] = none_factory,
                         default_other: DefaultFactory[U] = none_factory) -> 'Enumerable[V]':
        """zip sequences padding the shorter one with produced defaults"""
        from ..enumerable import Enumerable
        check_iterable('other', other, 'zip_longest_with')
        check_callable('result_selector', result_selector, 'zip_longest_with')
        check_callable('default_self', default_self, 'zip_longest_with')
        check_callable('default_other', default_other, 'zip_longest_with')
        other = as_enumerable(other)
        def zip_longest_data():
            self_cursor, other_cursor = self._enumerable.iterate(), other.iterate()
            while True:
                first, second = self_cursor.advance(), other_cursor.advance()
                if first is MISSING and second is MISSING:
                    return
                yield result_selector(default_self() if first is MISSING else first,
                                      default_other() if second is MISSING else second)
        return Enumerable(zip_longest_data)
