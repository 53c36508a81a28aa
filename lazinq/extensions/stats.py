from __future__ import annotations
import typing
import math
import numbers
import numpy as np
from ..types import *
from ..checks import check_optional_callable
from ..exceptions import EmptyInputError, InvalidNumericError, ArithmeticOverflowError

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

# the supported numeric range is that of a float64
_NUMERIC_LIMIT = float(np.finfo(np.float64).max)

Number = Union[int, float]


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def _check_in_range(value: Number, operation: str) -> Number:
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ArithmeticOverflowError(
                f"the accumulated value became non-finite ({value}) in '{operation}'.")
    if abs(value) > _NUMERIC_LIMIT:
        raise ArithmeticOverflowError(
            f"the current value left the supported numerical range in '{operation}'.")
    return value


class StatsAccessor(Generic[T]):
    """
    numeric aggregates. all of them are immediate, reject non-numeric values and
    refuse to return a result that overflowed or stopped being finite.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _get_values(self, selector: Optional[Selector[T, Number]], operation: str) -> Iterator[Number]:
        """helper to stream numeric values for statistical operations."""
        check_optional_callable('selector', selector, operation)
        for item in self._enumerable:
            value = selector(item) if selector else item
            if not _is_number(value):
                raise InvalidNumericError(
                    f"sequence contains non-numeric value {value!r} ({type(value).__name__}) "
                    f"for statistical operation '{operation}'.")
            # numpy scalars wrap on overflow, python numbers do not
            yield value.item() if isinstance(value, np.generic) else value

    def _accumulate(self, selector: Optional[Selector[T, Number]], operation: str) -> Tuple[int, Number]:
        """returns (count, total), checking the running total after every step"""
        count, total = 0, 0
        for value in self._get_values(selector, operation):
            _check_in_range(value, operation)
            total = _check_in_range(total + value, operation)
            count += 1
        return count, total

    def sum(self, selector: Optional[Selector[T, Number]] = None) -> Number:
        """calc sum"""
        count, total = self._accumulate(selector, 'sum')
        if count == 0: raise EmptyInputError("cannot calculate sum of empty sequence")
        return total

    def average(self, selector: Optional[Selector[T, Number]] = None) -> float:
        """calc average"""
        count, total = self._accumulate(selector, 'average')
        if count == 0: raise EmptyInputError("cannot calculate average of empty sequence")
        return float(total) / count

    def min(self, selector: Optional[Selector[T, Number]] = None) -> Number:
        """find minimum"""
        return self._extreme(selector, 'min', lambda candidate, best: candidate < best)

    def max(self, selector: Optional[Selector[T, Number]] = None) -> Number:
        """find maximum"""
        return self._extreme(selector, 'max', lambda candidate, best: candidate > best)

    def _extreme(self, selector: Optional[Selector[T, Number]], operation: str,
                 is_better: Callable[[Number, Number], bool]) -> Number:
        best: Any = MISSING
        for value in self._get_values(selector, operation):
            if isinstance(value, float) and math.isnan(value):
                raise InvalidNumericError(f"sequence contains nan for statistical operation '{operation}'.")
            if best is MISSING or is_better(value, best):
                best = value
        if best is MISSING:
            raise EmptyInputError(f"cannot find {'minimum' if operation == 'min' else 'maximum'} of empty sequence")
        return best
