from __future__ import annotations

from dataclasses import dataclass

from typing_extensions import final

__all__ = [
    "UsageError",
    "IndexOutOfRange",
]


@final
@dataclass
class UsageError(Exception):
    """
    Invalid command line input (missing or non-numeric index, unknown option).
    """

    message: str

    def __str__(self):
        return self.message


@final
@dataclass
class IndexOutOfRange(Exception):
    """
    The Fibonacci value of this index does not fit in the chosen width.
    """

    index: int
    """
    The requested index.
    """

    width: int
    """
    The width, in bits, of the unsigned integers.
    """

    limit: int
    """
    The largest index whose value still fits.
    """

    def __str__(self):
        return (
            f"fib({self.index}) does not fit in {self.width} bits "
            f"(largest valid index is {self.limit}), the value will wrap around"
        )
