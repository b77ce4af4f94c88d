import pytest

from simpleopt import (
    MalformedTableError,
    Option,
    OptionType,
    OptionValueError,
    check_table,
    match_option,
    reset_options,
    validate_table,
)


def make_table():
    return [
        Option(OptionType.FLAG, "h", "help"),
        Option(OptionType.INT, "n", "count", True),
        Option(OptionType.STRING, None, "name", True),
        Option.end(),
    ]


def test_valid_table():
    assert validate_table(make_table())
    check_table(make_table())


def test_option_without_names():
    table = [Option(OptionType.INT), Option.end()]
    assert not validate_table(table)
    with pytest.raises(MalformedTableError):
        check_table(table)


def test_flag_requiring_argument():
    assert not validate_table([Option(OptionType.FLAG, "f", None, True), Option.end()])


def test_duplicate_short_name():
    table = [Option(OptionType.FLAG, "x"), Option(OptionType.INT, "x", "ex"), Option.end()]
    assert not validate_table(table)
    with pytest.raises(MalformedTableError) as e:
        check_table(table)
    assert "-x" in str(e.value)


def test_duplicate_long_name():
    table = [Option(OptionType.FLAG, "a", "same"), Option(OptionType.FLAG, "b", "same"), Option.end()]
    assert not validate_table(table)


def test_entries_after_sentinel_are_ignored():
    table = [Option(OptionType.FLAG, "a"), Option.end(), Option(OptionType.FLAG, "a")]
    assert validate_table(table)
    assert match_option("-a", table) == 0


def test_table_without_sentinel():
    table = [Option(OptionType.FLAG, "a"), Option(OptionType.FLAG, "b")]
    assert validate_table(table)
    assert match_option("-b", table) == 1


def test_short_name_must_be_one_character():
    with pytest.raises(MalformedTableError):
        Option(OptionType.FLAG, "ab")


def test_match_short():
    table = make_table()
    assert match_option("-h", table) == 0
    assert match_option("-n", table) == 1
    assert match_option("-z", table) == -1


def test_match_rejects_bundled_short_options():
    assert match_option("-hn", make_table()) == -1


def test_match_long():
    table = make_table()
    assert match_option("--help", table) == 0
    assert match_option("--count=3", table) == 1
    assert match_option("--name", table) == 2


def test_match_long_needs_exact_name():
    table = make_table()
    assert match_option("--helpx", table) == -1
    assert match_option("--hel", table) == -1
    assert match_option("--", table) == -1


def test_match_degenerate_tokens():
    table = make_table()
    assert match_option("-", table) == -1
    assert match_option("", table) == -1
    assert match_option("xh", table) == -1


def test_match_first_in_table_order():
    table = [
        Option(OptionType.FLAG, "a", "opt"),
        Option(OptionType.FLAG, "b", "opt-two"),
        Option.end(),
    ]
    assert match_option("--opt-two", table) == 1
    assert match_option("--opt=1", table) == 0


def test_value_accessors_check_the_variant():
    o = Option(OptionType.INT, "n")
    with pytest.raises(OptionValueError):
        o.val_int
    o.store(5)
    assert o.val_int == 5
    with pytest.raises(OptionValueError):
        o.val_bool
    with pytest.raises(OptionValueError):
        o.val_unsigned


def test_reset_options():
    table = make_table()
    table[1].seen = True
    table[1].value_stored = True
    table[1].store(3)
    reset_options(table)
    assert not table[1].seen
    assert not table[1].value_stored
    assert table[1].value is None
