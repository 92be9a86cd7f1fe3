"""
Test suite for the stack runtime reader
Verifies word splitting and classification
"""

import pytest
import sys
import os

# Add grandparent directory to path for imports (to find stack_runtime package)
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from stack_runtime.reader import (
    classify, split_words, parse_number, OPEN, CLOSE,
)
from stack_runtime.values import Number, Operator, Symbol, INT32_MAX, INT32_MIN


class TestSplitWords:
    """Test splitting a line into words"""

    def test_single_spaces(self):
        assert split_words('1 2 +') == ['1', '2', '+']

    def test_repeated_and_trailing_separators(self):
        assert split_words('  1   2 +  ') == ['1', '2', '+']

    def test_tabs(self):
        assert split_words('1\t2\t+') == ['1', '2', '+']

    def test_empty_line(self):
        assert split_words('') == []


class TestClassify:
    """Test classification of individual words"""

    def test_empty_word_is_noop(self):
        assert classify('') is None

    def test_block_markers(self):
        assert classify('{') is OPEN
        assert classify('}') is CLOSE

    def test_integer(self):
        assert classify('42') == Number(42)

    def test_negative_integer(self):
        assert classify('-1') == Number(-1)

    def test_explicit_plus_sign(self):
        assert classify('+7') == Number(7)

    def test_int32_bounds(self):
        assert classify(str(INT32_MAX)) == Number(INT32_MAX)
        assert classify(str(INT32_MIN)) == Number(INT32_MIN)

    def test_out_of_range_falls_through_to_operator(self):
        word = str(INT32_MAX + 1)
        assert classify(word) == Operator(word)

    def test_huge_digit_word_is_operator(self):
        word = '9' * 5000
        assert classify(word) == Operator(word)

    def test_leading_zeros(self):
        assert classify('000000000042') == Number(42)
        assert classify('-' + '0' * 5000 + '7') == Number(-7)

    def test_partial_number_is_operator(self):
        assert classify('12abc') == Operator('12abc')
        assert classify('1_000') == Operator('1_000')

    def test_symbol(self):
        assert classify('/x') == Symbol('x')

    def test_symbol_keeps_rest_verbatim(self):
        assert classify('//') == Symbol('/')

    def test_bare_marker_is_division(self):
        assert classify('/') == Operator('/')

    def test_sign_alone_is_operator(self):
        assert classify('-') == Operator('-')
        assert classify('+') == Operator('+')

    def test_operator_name_verbatim(self):
        assert classify('dup') == Operator('dup')
        assert classify('Dup') == Operator('Dup')


class TestParseNumber:
    """Test numeric literal parsing"""

    def test_valid(self):
        assert parse_number('-15') == -15

    def test_invalid(self):
        assert parse_number('1.5') is None
        assert parse_number(' 1') is None

