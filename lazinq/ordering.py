"""
partition engine behind order_by / then_by chains.

an ordered sequence is a stack of sort levels. each level pulls the partitions
produced by the level beneath it, sorts every partition on its own key and splits
the sorted run wherever the key changes. partitions are never reordered relative
to one another, so ties left by one level keep the order the level below gave them.
"""
from __future__ import annotations

import logging
import typing
from abc import ABC, abstractmethod
from collections import deque
from functools import cmp_to_key
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

logger = logging.getLogger(__name__)


class PartitionSource(ABC, Generic[T]):
    """anything that can hand out an outer cursor over partitions"""

    @abstractmethod
    def partitions(self) -> Iterator[Iterator[T]]:
        pass


class UnorderedPartitions(PartitionSource[T]):
    """the bottom of every chain: the whole upstream sequence as one partition."""

    def __init__(self, enumerable: 'Enumerable[T]'):
        self._enumerable = enumerable

    def partitions(self) -> Iterator[Iterator[T]]:
        return iter([iter(self._enumerable)])


def refine_partition(items: Iterable[T], key_selector: KeySelector[T, K],
                     comparer: Comparer[K]) -> List[List[T]]:
    """
    sort one partition by the given key and split it into maximal runs of equal key.
    the key selector runs once per element; list.sort is stable, so equal keys keep
    their incoming order.
    """
    keyed = [(key_selector(item), item) for item in items]
    keyed.sort(key=cmp_to_key(lambda first, second: comparer(first[0], second[0])))

    runs: List[List[T]] = []
    previous_key: Any = MISSING
    for key, item in keyed:
        if previous_key is MISSING or comparer(previous_key, key) != 0:
            runs.append([])
        runs[-1].append(item)
        previous_key = key
    return runs


class PartitionCursor(Iterator[Iterator[T]]):
    """
    outer cursor of one sort level. yields an inner cursor per partition.
    upstream partitions are pulled and refined one at a time, on demand.
    """

    def __init__(self, upstream: PartitionSource[T], key_selector: KeySelector[T, K],
                 comparer: Comparer[K]):
        self._upstream = upstream
        self._key_selector = key_selector
        self._comparer = comparer
        self._upstream_cursor: Optional[Iterator[Iterator[T]]] = None
        self._pending: deque = deque()
        self._exhausted = False

    def __iter__(self) -> 'PartitionCursor[T]':
        return self

    def __next__(self) -> Iterator[T]:
        if self._exhausted:
            raise StopIteration
        if self._upstream_cursor is None:
            self._upstream_cursor = self._upstream.partitions()

        while not self._pending:
            upstream_partition = next(self._upstream_cursor, None)
            if upstream_partition is None:
                self._exhausted = True
                self._upstream_cursor = None
                raise StopIteration
            runs = refine_partition(upstream_partition, self._key_selector, self._comparer)
            if len(runs) > 1:
                logger.debug(f"refined partition into {len(runs)} sub-partitions")
            self._pending.extend(runs)

        return iter(self._pending.popleft())
