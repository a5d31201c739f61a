import time
from typing import List
from unittest import TestCase

import hypothesis.strategies as st
from hypothesis import given

from memofib.clock import *


def fake_clock(*readings: float):
    it = iter(readings)
    return lambda: next(it)


class TestMeasure(TestCase):
    def test_milliseconds_are_truncated(self) -> None:
        assert measure(lambda: None, clock=fake_clock(10.0, 10.0129)) == 12

    @given(st.floats(min_value=0, max_value=1e6), st.floats(min_value=0, max_value=1e3))
    def test_never_negative(self, start: float, elapsed: float) -> None:
        assert measure(lambda: None, clock=fake_clock(start, start + elapsed)) >= 0

    def test_units(self) -> None:
        readings = (1.0, 3.5)
        seconds = measure(
            lambda: None, unit=TimeUnit.SECONDS, clock=fake_clock(*readings)
        )
        micros = measure(
            lambda: None, unit=TimeUnit.MICROSECONDS, clock=fake_clock(*readings)
        )
        assert seconds == 2
        assert micros == 2_500_000

    def test_forwards_arguments(self) -> None:
        seen: List[object] = []
        measure(lambda a, b=None: seen.extend([a, b]), 1, b=2)
        assert seen == [1, 2]

    def test_propagates_failures(self) -> None:
        def boom() -> None:
            raise RuntimeError("boom")

        with self.assertRaises(RuntimeError):
            measure(boom)

    def test_real_clock(self) -> None:
        assert measure(time.sleep, 0.02) >= 10

    def test_parse(self) -> None:
        assert TimeUnit.parse("ms") is TimeUnit.MILLISECONDS
        assert TimeUnit.parse("ns") is TimeUnit.NANOSECONDS
