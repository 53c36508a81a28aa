import typing
from itertools import count as _count
from .types import *
from .checks import check_callable, check_iterable, check_not_none, check_optional_count

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def from_iterable(data: Iterable[T], predicate: Optional[Predicate[T]] = None) -> 'Enumerable[T]':
    """create enumerable from iterable, optionally keeping only items that match predicate"""
    from .enumerable import Enumerable
    return Enumerable(data, predicate)

def as_enumerable(data: Iterable[T]) -> 'Enumerable[T]':
    """return data unchanged if it already is an enumerable, otherwise wrap it"""
    from .enumerable import Enumerable
    if isinstance(data, Enumerable):
        return data
    return from_iterable(data)

def from_range(start: int, count: Optional[int] = None) -> 'Enumerable[int]':
    """create enumerable of consecutive integers. without a count the range never ends."""
    from .enumerable import Enumerable
    check_not_none('start', start, 'from_range')
    check_optional_count('count', count, 'from_range')
    def range_data():
        if count is None:
            yield from _count(start)
        else:
            yield from range(start, start + count)
    return Enumerable(range_data)

def repeat(item: T, count: Optional[int] = None) -> 'Enumerable[T]':
    """create enumerable with repeated item. without a count it repeats forever."""
    from .enumerable import Enumerable
    check_optional_count('count', count, 'repeat')
    def repeat_data():
        produced = 0
        while count is None or produced < count:
            produced += 1
            yield item
    return Enumerable(repeat_data)

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(())

def generate(generator_func: Callable[[], T], count: Optional[int] = None) -> 'Enumerable[T]':
    """
    sequence whose items come from calling generator_func once per pull. without a
    count it is infinite; combine with take() or take_while().
    """
    from .enumerable import Enumerable
    check_callable('generator_func', generator_func, 'generate')
    check_optional_count('count', count, 'generate')
    def generate_data():
        produced = 0
        while count is None or produced < count:
            produced += 1
            yield generator_func()
    return Enumerable(generate_data)

# --- aliases ---
lazinq = from_iterable
P = from_iterable
p = from_iterable
