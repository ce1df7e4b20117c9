"""
Numeric parsing tests — free text in, float out, never an exception.
"""

import math

from takeoff.parsing import parse_number, parse_dimension, try_parse_number


def test_parse_number_plain_and_padded_text():
    assert parse_number("12.5") == 12.5
    assert parse_number("  40 ") == 40.0
    assert parse_number(7) == 7.0


def test_parse_number_decimal_comma():
    """Brazilian input '2,5' reads as 2.5."""
    assert parse_number("2,5") == 2.5


def test_parse_number_blank_and_garbage_are_zero():
    assert parse_number("") == 0.0
    assert parse_number(None) == 0.0
    assert parse_number("abc") == 0.0
    assert parse_number("1.2.3") == 0.0
    assert parse_number("1.234,5") == 0.0  # ambiguous, rejected


def test_parse_number_nan_and_inf_are_zero():
    assert parse_number("nan") == 0.0
    assert parse_number(float("inf")) == 0.0


def test_parse_dimension_clamps_negative():
    assert parse_dimension("-30") == 0.0
    assert parse_dimension("30") == 30.0


def test_try_parse_number_distinguishes_blank_from_zero():
    assert try_parse_number("0") == 0.0
    assert try_parse_number("") is None
    assert try_parse_number("x") is None
    assert try_parse_number(True) is None
    assert math.isclose(try_parse_number("-3.5"), -3.5)
