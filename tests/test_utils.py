from unittest import TestCase

from memofib.utils import *


class TestErrors(TestCase):
    def test_usage_error_message(self):
        assert str(UsageError("usage: memofib n")) == "usage: memofib n"

    def test_index_out_of_range_message(self):
        msg = str(IndexOutOfRange(48, 32, 47))
        assert "fib(48)" in msg
        assert "47" in msg

    def test_equality(self):
        assert IndexOutOfRange(48, 32, 47) == IndexOutOfRange(48, 32, 47)
