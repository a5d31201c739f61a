"""
Benchmark driver: times the three Fibonacci variants for one index.
"""
from __future__ import annotations

import logging
import sys
from logging import Formatter, StreamHandler
from typing import Callable, Optional, Sequence, TextIO

from memofib.clock import measure
from memofib.config import BenchConfig
from memofib.fibonacci import (
    check_index,
    descend,
    fibonacci,
    fibonacci_with_memoization,
    memoized,
)
from memofib.utils import IndexOutOfRange, UsageError

__all__ = ["setup_logging", "report", "main", "run"]

logger = logging.getLogger(__name__)


_handler: Optional[StreamHandler] = None


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr, stdout is reserved for the results.

    Only the handler installed by a previous call is replaced, other root
    handlers are left alone.
    """
    global _handler
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if _handler is not None:
        root.removeHandler(_handler)
    _handler = StreamHandler(sys.stderr)
    _handler.setFormatter(Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root.addHandler(_handler)


def report(
    label: str,
    n: int,
    function: Callable[[], int],
    config: BenchConfig,
    out: TextIO,
) -> None:
    """
    Print `label(n) -> value` from inside the timed action, then its duration.
    """

    def action() -> None:
        value = function()
        print(f"{label}({n}) -> {value}", file=out, flush=True)

    elapsed = measure(action, unit=config.unit)
    print(f"Duration: {elapsed}", file=out, flush=True)


def main(config: BenchConfig, out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    index = config.index
    width = config.width
    try:
        check_index(index, width)
    except IndexOutOfRange as exn:
        logger.warning("%s", exn)

    memoized_fibonacci = memoized(width)
    report("fibonocci", config.n, lambda: fibonacci(index, width), config, out)
    report(
        "fibonocci_with_memoization",
        config.n,
        lambda: descend(lambda k: fibonacci_with_memoization(k, width), index),
        config,
        out,
    )
    report(
        "memoized",
        config.n,
        lambda: descend(memoized_fibonacci, index),
        config,
        out,
    )
    logger.debug("generic memo table holds %d entries", len(memoized_fibonacci))


def run(argv: Optional[Sequence[str]] = None) -> int:
    """
    Console entry point.

    :return: the exit status.
    """
    try:
        config = BenchConfig.from_args(argv)
    except UsageError as exn:
        print(exn, file=sys.stderr)
        return 2
    setup_logging(config.verbose)
    main(config)
    return 0
