"""
Three ways to compute the Fibonacci sequence over fixed width unsigned
integers:

- `fibonacci`: the naive exponential recursion.
- `fibonacci_with_memoization`: the same recursion guarded by a cache
  attached to the function itself.
- `memoized`: the recurrence written with open recursion and wrapped by the
  generic `Memoizer`.

All of them wrap around silently modulo `2 ** width`.
"""
from __future__ import annotations

import sys
from enum import IntEnum
from typing import Callable, Dict, Tuple, TypeVar

from typing_extensions import final

from memofib.memo import Memoizer, memoize_open
from memofib.utils import IndexOutOfRange

__all__ = [
    "Width",
    "max_index",
    "check_index",
    "iterate",
    "fibonacci",
    "fibonacci_with_memoization",
    "memoized",
    "descend",
    "MAX_TABULATED",
]

V = TypeVar("V")

# Recursive descents deeper than this go iterative or get split into chunks.
DEPTH_LIMIT = max(64, sys.getrecursionlimit() // 8)

# Largest index the memo tables are allowed to grow to.
MAX_TABULATED = 100_000


@final
class Width(IntEnum):
    """
    Supported unsigned integer widths, in bits.
    """

    U32 = 32
    U64 = 64

    @property
    def mask(self) -> int:
        return (1 << self.value) - 1


def max_index(width: Width = Width.U32) -> int:
    """
    The largest `n` whose Fibonacci value fits in `width` bits.

    :param width:
    :return:
    """
    bound = 1 << width
    n, a, b = 0, 0, 1
    while b < bound:
        n, a, b = n + 1, b, a + b
    return n


def check_index(n: int, width: Width = Width.U32) -> int:
    """
    Return `n` if `fib(n)` fits in `width` bits, raise `IndexOutOfRange` otherwise.

    :param n:
    :param width:
    :return:
    """
    limit = max_index(width)
    if not 0 <= n <= limit:
        raise IndexOutOfRange(n, int(width), limit)
    return n


def iterate(n: int, width: Width = Width.U32) -> int:
    """
    Bottom-up loop over the recurrence, constant stack.
    """
    mask = width.mask
    a, b = 0, 1
    for _ in range(n):
        a, b = b, (a + b) & mask
    return a


def fibonacci(n: int, width: Width = Width.U32) -> int:
    """
    Naive recursion: every call computes both sub-problems again, so the
    running time grows like `phi ** n`.

    Indices beyond the recursion budget are computed with `iterate`.
    """
    if n <= 1:
        return n
    if n > DEPTH_LIMIT:
        return iterate(n, width)
    return (fibonacci(n - 1, width) + fibonacci(n - 2, width)) & width.mask


def fibonacci_with_memoization(n: int, width: Width = Width.U32) -> int:
    """
    Naive recursion plus a cache living as long as the process.

    The cache is the `cache` attribute of this function, keyed by
    `(width, n)`.
    """
    if n <= 1:
        return n

    memo = fibonacci_with_memoization.cache  # type: ignore
    key = (width, n)
    if key in memo:
        return memo[key]

    result = (
        fibonacci_with_memoization(n - 1, width)
        + fibonacci_with_memoization(n - 2, width)
    ) & width.mask
    memo[key] = result
    return result


fibonacci_with_memoization.cache: Dict[Tuple[Width, int], int] = {}  # type: ignore


def memoized(width: Width = Width.U32) -> Memoizer[int, int]:
    """
    Build a new memoized Fibonacci function with its own table.

    The recurrence calls `self`, the memoized handle, so every sub-result
    lands in the table.

    :param width:
    :return:
    """
    mask = width.mask

    def fibonacci_open(self: Callable[[int], int], n: int) -> int:
        if n == 0:
            return 0
        if n == 1:
            # keeps 0 in the table too, so fib(n) leaves every index up to n
            self(0)
            return 1
        return (self(n - 1) + self(n - 2)) & mask

    return memoize_open(fibonacci_open)


def descend(function: Callable[[int], V], n: int, step: int = DEPTH_LIMIT) -> V:
    """
    Evaluate `function(n)` after warming a memoized recursion bottom-up.

    `function(step)`, `function(2 * step)`, ... are evaluated first so each
    recursive descent stops at an already cached index after at most `step`
    levels. For `n < step` this is just `function(n)`.

    :param function: a memoized function of the index.
    :param n:
    :param step:
    :return:
    """
    for k in range(step, n, step):
        function(k)
    return function(n)
