"""
Wall-clock measurement of a single action.
"""
from __future__ import annotations

import logging
from enum import IntEnum
from timeit import default_timer
from typing import Any, Callable

from typing_extensions import final

__all__ = ["TimeUnit", "measure"]

logger = logging.getLogger(__name__)


@final
class TimeUnit(IntEnum):
    """
    Units a duration can be reported in, valued by how many of them fit in a second.
    """

    SECONDS = 1
    MILLISECONDS = 1_000
    MICROSECONDS = 1_000_000
    NANOSECONDS = 1_000_000_000

    @classmethod
    def parse(cls, symbol: str) -> TimeUnit:
        """
        Get the unit from its usual symbol (`s`, `ms`, `us` or `ns`).

        :param symbol:
        :return:
        """
        return _SYMBOLS[symbol]


_SYMBOLS = {
    "s": TimeUnit.SECONDS,
    "ms": TimeUnit.MILLISECONDS,
    "us": TimeUnit.MICROSECONDS,
    "ns": TimeUnit.NANOSECONDS,
}


def measure(
    action: Callable[..., Any],
    *args: Any,
    unit: TimeUnit = TimeUnit.MILLISECONDS,
    clock: Callable[[], float] = default_timer,
    **kwargs: Any,
) -> int:
    """
    Run `action(*args, **kwargs)` and return how long it took, truncated to
    a whole number of `unit`.

    Whatever `action` returns is discarded and whatever it raises propagates
    unchanged.

    :param action: the computation to time.
    :param args: positional arguments forwarded to `action`.
    :param unit: the unit of the result, milliseconds by default.
    :param clock: a monotonic clock returning seconds as a float.
    :param kwargs: keyword arguments forwarded to `action`.
    :return: the elapsed time, never negative.
    """
    start = clock()
    action(*args, **kwargs)
    end = clock()
    elapsed = max(0, int((end - start) * unit))
    name = getattr(action, "__name__", repr(action))
    logger.debug("%s took %d %s", name, elapsed, unit.name.lower())
    return elapsed
