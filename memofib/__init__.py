from memofib import clock, fibonacci, memo
from memofib.clock import TimeUnit, measure
from memofib.config import BenchConfig
from memofib.fibonacci import Width, max_index
from memofib.memo import Memoizer, memoize, memoize_open
from memofib.utils import IndexOutOfRange, UsageError

__all__ = [
    "clock",
    "fibonacci",
    "memo",
    "TimeUnit",
    "measure",
    "BenchConfig",
    "Width",
    "max_index",
    "Memoizer",
    "memoize",
    "memoize_open",
    "IndexOutOfRange",
    "UsageError",
]
