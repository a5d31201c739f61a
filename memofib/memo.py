"""
Memoization of unary functions.

A `Memoizer` wraps a deterministic function `f: K -> V` and caches its
results in a table owned by the wrapper. The function is evaluated at most
once per distinct key: every later call with that key is a table lookup.

Recursive functions only benefit from the cache when their recursive calls
go through the wrapper. Two ways to get there:

- open recursion with `memoize_open`: the function takes the memoized handle
  as its first argument and calls it instead of itself.
- decoration: `Memoizer` used as a decorator replaces the module level name,
  so recursive calls by name reach the wrapper.
"""
from __future__ import annotations

import logging
from functools import update_wrapper
from types import MappingProxyType
from typing import Callable, Dict, Generic, Mapping, TypeVar

from typing_extensions import final

__all__ = [
    "Memoizer",
    "memoize",
    "memoize_open",
]

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


@final
class Memoizer(Generic[K, V]):
    """
    Caching equivalent of a unary function.

    The table is shared by the outer call and every recursive call going
    through this wrapper. It only grows: nothing is ever evicted.
    """

    def __init__(self, function: Callable[[K], V]) -> None:
        self.function = function
        self._table: Dict[K, V] = {}
        self.__name__ = type(function).__name__
        update_wrapper(self, function)

    def __call__(self, key: K) -> V:
        """
        Return `function(key)`, computing it only if this key was never seen.

        If `function` raises, the exception propagates and nothing is stored
        for `key`, so a later call tries again.

        :param key:
        :return:
        """
        table = self._table
        if key in table:
            logger.debug("cache hit for %s(%r)", self.__name__, key)
            return table[key]
        logger.debug("cache miss for %s(%r)", self.__name__, key)
        value = self.function(key)
        # A re-entrant call may already have stored this key: the first value wins.
        return table.setdefault(key, value)

    @property
    def cache(self) -> Mapping[K, V]:
        """
        Read-only view of the memo table.
        """
        return MappingProxyType(self._table)

    def clear(self) -> None:
        """
        Forget every cached value.
        """
        self._table.clear()

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, key: object) -> bool:
        return key in self._table

    def __repr__(self):
        return f"Memoizer({self.__name__}, {len(self._table)} cached)"


def memoize(function: Callable[[K], V]) -> Memoizer[K, V]:
    """
    Wrap `function` with a fresh memo table.

    Recursive calls inside `function` only hit the cache if they call the
    returned wrapper (see `memoize_open`).

    :param function: a deterministic unary function.
    :return:
    """
    return Memoizer(function)


def memoize_open(function: Callable[[Callable[[K], V], K], V]) -> Memoizer[K, V]:
    """
    Wrap an open recursive function `function(self, key)`.

    `self` is the returned wrapper itself: every recursive call made through
    it reads and fills the same table.

    :param function:
    :return:
    """

    def step(key: K) -> V:
        return function(handle, key)

    handle: Memoizer[K, V] = Memoizer(step)
    update_wrapper(handle, function)
    return handle
