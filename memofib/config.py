"""
Command line configuration of the benchmark.
"""
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import List, Optional, Sequence

from typing_extensions import final

from memofib.clock import TimeUnit
from memofib.fibonacci import MAX_TABULATED, Width
from memofib.utils import UsageError

__all__ = ["BenchConfig", "parser"]


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageError(f"{self.format_usage()}{self.prog}: error: {message}")


def parser() -> argparse.ArgumentParser:
    p = _Parser(
        prog="memofib",
        description="Time naive and memoized Fibonacci computations.",
    )
    p.add_argument("n", type=int, help="the Fibonacci index")
    p.add_argument(
        "--bits",
        type=int,
        choices=[int(w) for w in Width],
        default=int(Width.U32),
        help="width of the unsigned integers (default: 32)",
    )
    p.add_argument(
        "--unit",
        choices=["s", "ms", "us", "ns"],
        default="ms",
        help="unit of the reported durations (default: ms)",
    )
    p.add_argument(
        "-v", "--verbose", action="store_true", help="debug logging on stderr"
    )
    return p


@final
@dataclass(frozen=True)
class BenchConfig:
    n: int
    """
    The Fibonacci index as given on the command line.
    """

    width: Width = Width.U32
    unit: TimeUnit = TimeUnit.MILLISECONDS
    verbose: bool = False

    @property
    def index(self) -> int:
        """
        `n` converted to an unsigned integer of `width` bits.
        """
        return self.n & self.width.mask

    @classmethod
    def from_args(cls, argv: Optional[Sequence[str]] = None) -> BenchConfig:
        """
        Parse the command line (`sys.argv[1:]` when `argv` is None).

        :param argv:
        :return:
        :raise UsageError: on missing, non-numeric or unknown arguments, or on
            an index outside `[0, MAX_TABULATED]`.
        """
        args: Optional[List[str]] = list(argv) if argv is not None else None
        p = parser()
        ns = p.parse_args(args)
        if not 0 <= ns.n <= MAX_TABULATED:
            p.error(f"n must be between 0 and {MAX_TABULATED}, got {ns.n}")
        return cls(
            n=ns.n,
            width=Width(ns.bits),
            unit=TimeUnit.parse(ns.unit),
            verbose=ns.verbose,
        )
