from __future__ import annotations
import typing
import logging
import random
from ..types import *
from ..checks import check_callable
from ..exceptions import EmptyInputError

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)


class UtilityAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def for_each(self, action: Callable[[T], Any]) -> 'Enumerable[T]':
        """
        performs the specified action on each element of a sequence for side-effects.
        this is an EAGER operation that executes immediately.
        returns the original enumerable to allow chaining.
        """
        check_callable('action', action, 'for_each')
        for item in self._enumerable:
            action(item)
        return self._enumerable

    def side_effect(self, action: Callable[[T], Any]) -> 'Enumerable[T]':
        """
        performs a side-effect action for each element as it passes through the sequence
        without modifying it. this operation is lazy and is primarily used for debugging
        pipelines without materializing the data.
        example: .where(...).util.side_effect(print).select(...)
        """
        from ..enumerable import Enumerable
        check_callable('action', action, 'side_effect')
        def side_effect_data():
            for item in self._enumerable:
                action(item)
                yield item
        return Enumerable(side_effect_data)

    def memoize(self) -> 'Enumerable[T]':
        """
        returns a new enumerable that caches items the first time they are pulled.
        this operation is LAZY: nothing is evaluated until the new enumerable is
        iterated, and later traversals replay the cache before pulling further.
        """
        from ..enumerable import Enumerable
        buffer = ReplayBuffer(lambda: self._enumerable)
        return Enumerable(buffer.replay)

    def cycle(self) -> 'Enumerable[T]':
        """
        repeats the sequence forever. an empty source is detected up front and yields
        nothing. combine with take() or take_while().
        """
        from ..enumerable import Enumerable
        def cycle_data():
            if not self._enumerable.to.any():
                return
            while True:
                yield from self._enumerable
        return Enumerable(cycle_data)

    def random(self, seed: Optional[int] = None) -> 'Enumerable[T]':
        """
        yields uniformly drawn source elements forever. raises EmptyInputError on the
        first pull if the source is empty. combine with take() or take_while().
        """
        from ..enumerable import Enumerable
        def random_data():
            pool = self._enumerable.to.list()
            if not pool:
                raise EmptyInputError("cannot draw random elements from an empty sequence")
            logger.debug(f"drawing random elements from a pool of {len(pool)}")
            rng = random.Random(seed)
            while True:
                yield rng.choice(pool)
        return Enumerable(random_data)

    def shuffle(self, seed: Optional[int] = None) -> 'Enumerable[T]':
        """yields every element once, in a new random order on each traversal"""
        from ..enumerable import Enumerable
        rng = random.Random(seed)
        def shuffle_data():
            items = self._enumerable.to.list()
            logger.debug(f"shuffling {len(items)} elements")
            rng.shuffle(items)
            yield from items
        return Enumerable(shuffle_data)

    def pipe(self, func: Callable[..., U], *args, **kwargs) -> U:
        """
        pipes the enumerable object into an external function. enables custom, chainable operations.
        example: .util.pipe(my_custom_report, title='my data')
        """
        check_callable('func', func, 'pipe')
        return func(self._enumerable, *args, **kwargs)
