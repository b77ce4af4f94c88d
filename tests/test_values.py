import math

import pytest

from simpleopt import Limits, Option, OptionType, parse_value
from simpleopt.values import parse_bool, parse_double, parse_integer, parse_unsigned, INT_MAX, INT_MIN


@pytest.mark.parametrize("text", ["TRUE", "Yes", "ON", "true", "yes", "on"])
def test_bool_true_words(text):
    assert parse_bool(text) is True


@pytest.mark.parametrize("text", ["False", "no", "Off", "FALSE", "NO"])
def test_bool_false_words(text):
    assert parse_bool(text) is False


@pytest.mark.parametrize("text", ["maybe", "", "y", "tru", "truex", "onn", " on"])
def test_bool_needs_the_whole_word(text):
    assert parse_bool(text) is None


def test_integer_bases():
    assert parse_integer("42", INT_MIN, INT_MAX) == 42
    assert parse_integer("-42", INT_MIN, INT_MAX) == -42
    assert parse_integer("+7", INT_MIN, INT_MAX) == 7
    assert parse_integer("0x1F", INT_MIN, INT_MAX) == 31
    assert parse_integer("0X1f", INT_MIN, INT_MAX) == 31
    assert parse_integer("010", INT_MIN, INT_MAX) == 8
    assert parse_integer("0", INT_MIN, INT_MAX) == 0
    assert parse_integer("  12", INT_MIN, INT_MAX) == 12


@pytest.mark.parametrize("text", ["", "-", "12abc", "0x", "08", "1.5", "12 ", "abc"])
def test_integer_rejects_partial_input(text):
    assert parse_integer(text, INT_MIN, INT_MAX) is None


def test_integer_overflow():
    assert parse_integer("9223372036854775807", INT_MIN, INT_MAX) == INT_MAX
    assert parse_integer("-9223372036854775808", INT_MIN, INT_MAX) == INT_MIN
    assert parse_integer("9223372036854775808", INT_MIN, INT_MAX) is None
    assert parse_integer("-9223372036854775809", INT_MIN, INT_MAX) is None


def test_unsigned():
    assert parse_unsigned("18446744073709551615") == (1 << 64) - 1
    assert parse_unsigned("0x10") == 16
    assert parse_unsigned("18446744073709551616") is None
    assert parse_unsigned("+5") is None
    assert parse_unsigned("-5") is None
    assert parse_unsigned(" -5") is None
    assert parse_unsigned("") is None


def test_double():
    assert parse_double("3.5") == 3.5
    assert parse_double("1e3") == 1000.0
    assert parse_double("-.5") == -0.5
    assert parse_double("1.") == 1.0
    assert parse_double("0x1.8p1") == 3.0
    assert parse_double("0.000") == 0.0
    assert math.isinf(parse_double("inf"))
    assert math.isnan(parse_double("NaN"))


@pytest.mark.parametrize("text", ["", "abc", "1.5x", "1e", ".", "1_0", "1e400", "1e-400", "3.5 "])
def test_double_rejects(text):
    assert parse_double(text) is None


def test_parse_value_stores_only_on_success():
    o = Option(OptionType.INT, "n")
    assert not parse_value(o, "nope")
    assert o.value is None

    assert parse_value(o, "12")
    assert o.val_int == 12

    assert not parse_value(o, "13x")
    assert o.val_int == 12


def test_parse_value_char():
    o = Option(OptionType.CHAR, "c")
    assert parse_value(o, "x")
    assert o.val_char == "x"
    assert not parse_value(o, "xy")
    assert not parse_value(o, "")


def test_parse_value_string_capacity():
    o = Option(OptionType.STRING, "s")
    limits = Limits(opt_arg_max_width=8)
    assert parse_value(o, "a" * 6, limits)
    assert o.val_string == "aaaaaa"
    assert not parse_value(o, "a" * 7, limits)
    assert o.val_string == "aaaaaa"


def test_parse_value_string_set():
    o = Option(OptionType.STRING_SET, None, "mode", choices=["fast", "slow"])
    assert parse_value(o, "slow")
    assert o.val_string_set_idx == 1
    assert o.chosen == "slow"
    assert not parse_value(o, "FAST")
    assert not parse_value(o, "")


def test_parse_value_flag_carries_nothing():
    o = Option(OptionType.FLAG, "h")
    assert not parse_value(o, "yes")
    assert o.value is None


@pytest.mark.parametrize("text", ["١.٥", "٣", "\u20081.5", "\u00a02"])
def test_double_only_takes_ascii_digits_and_spaces(text):
    assert parse_double(text) is None


@pytest.mark.parametrize("text", ["١٢", "\u200812", "\u00a012"])
def test_integer_only_takes_ascii_digits_and_spaces(text):
    assert parse_integer(text, INT_MIN, INT_MAX) is None
    assert parse_unsigned(text) is None


def test_ascii_whitespace_prefix_is_still_accepted():
    assert parse_integer("\t 12", INT_MIN, INT_MAX) == 12
    assert parse_double("\n2.5") == 2.5
