import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from DiceRoller.dice.constants import DIE_SIZES
from DiceRoller.dice.errors import (
    DiceCountError,
    DieSizeError,
    NotationError,
    NotationFormatError,
)
from DiceRoller.dice.parser import format_notation, parse_notation
from DiceRoller.dice.types import DiceNotation
from DiceRoller.metrics import get_counter


def test_parse_simple():
    assert parse_notation("2d6") == DiceNotation(count=2, sides=6, modifier=0)
    assert parse_notation("1d20") == DiceNotation(count=1, sides=20, modifier=0)


def test_parse_every_legal_die():
    assert [parse_notation(f"1d{s}").sides for s in DIE_SIZES] == list(DIE_SIZES)


def test_parse_modifiers():
    assert parse_notation("2d6+3") == DiceNotation(2, 6, 3)
    assert parse_notation("2d6-3") == DiceNotation(2, 6, -3)
    assert parse_notation("1d20+10").modifier == 10
    assert parse_notation("1d20-15").modifier == -15
    assert parse_notation("2d6+0") == parse_notation("2d6")


def test_parse_count_bounds_inclusive():
    assert parse_notation("100d6").count == 100
    assert parse_notation("1d6").count == 1


def test_parse_trims_whitespace():
    assert parse_notation("  2d6") == parse_notation("2d6")
    assert parse_notation("2d6  ") == parse_notation("2d6")
    assert parse_notation("  2d6+3  ") == DiceNotation(2, 6, 3)
    assert parse_notation("\t1d8\n") == DiceNotation(1, 8, 0)


def test_parse_is_case_insensitive():
    assert parse_notation("2D6") == parse_notation("2d6")
    assert parse_notation("2D6+3") == DiceNotation(2, 6, 3)


def test_leading_zeros_are_base_ten():
    assert parse_notation("02d08") == DiceNotation(2, 8, 0)


@pytest.mark.parametrize("bad", ["abc", "2x6", "d20", "2d", "", "2d6 + 3", "2d6+1d4", "-1d6"])
def test_format_errors(bad):
    with pytest.raises(NotationFormatError):
        parse_notation(bad)


def test_leading_zeros_beyond_digit_limit_still_parse():
    assert parse_notation("0" * 5000 + "2d6") == DiceNotation(2, 6, 0)
    assert parse_notation("1d" + "0" * 5000 + "8") == DiceNotation(1, 8, 0)
    assert parse_notation("1d6-" + "0" * 5000 + "4") == DiceNotation(1, 6, -4)


def test_overlong_modifier_is_a_format_error():
    with pytest.raises(NotationFormatError) as exc:
        parse_notation("1d6+" + "9" * 5000)
    assert "modifier must have at most 1000 digits" in str(exc.value)
    # Right at the limit it still parses.
    assert parse_notation("1d6+" + "9" * 1000).modifier == int("9" * 1000)


def test_overlong_count_and_sides_report_their_digits():
    with pytest.raises(DiceCountError) as exc:
        parse_notation("9" * 5000 + "d6")
    assert exc.value.count == "9" * 5000
    with pytest.raises(DieSizeError) as exc:
        parse_notation("1d" + "0" * 10 + "1234")
    assert exc.value.sides == "1234"
    assert "Invalid die size d1234" in str(exc.value)


def test_count_error_still_precedes_overlong_sides():
    with pytest.raises(DiceCountError):
        parse_notation("0d" + "7" * 5000)


def test_format_error_keeps_untrimmed_input():
    with pytest.raises(NotationFormatError) as exc:
        parse_notation("  abc ")
    assert exc.value.notation == "  abc "
    assert 'Invalid dice notation "  abc "' in str(exc.value)
    assert exc.value.kind == "format"


def test_non_string_is_a_format_error():
    with pytest.raises(NotationFormatError):
        parse_notation(None)


@pytest.mark.parametrize("bad,count", [("0d6", 0), ("101d6", 101), ("500d20", 500)])
def test_count_errors(bad, count):
    with pytest.raises(DiceCountError) as exc:
        parse_notation(bad)
    assert exc.value.count == count
    assert f"Invalid dice count {count}" in str(exc.value)


@pytest.mark.parametrize("bad,sides", [("2d3", 3), ("2d7", 7), ("2d13", 13), ("2d50", 50)])
def test_die_size_errors(bad, sides):
    with pytest.raises(DieSizeError) as exc:
        parse_notation(bad)
    assert exc.value.sides == sides
    assert exc.value.legal_sizes == DIE_SIZES
    assert f"Invalid die size d{sides}" in str(exc.value)
    assert "d4, d6, d8, d10, d12, d20, d100" in str(exc.value)


def test_count_is_checked_before_die_size():
    # Both wrong; count wins.
    with pytest.raises(DiceCountError):
        parse_notation("0d7")


def test_errors_share_a_valueerror_base():
    for bad in ("abc", "0d6", "2d7"):
        with pytest.raises(NotationError):
            parse_notation(bad)
        with pytest.raises(ValueError):
            parse_notation(bad)


def test_rejections_are_counted_by_kind():
    for bad in ("abc", "d20", "0d6", "2d7"):
        with pytest.raises(NotationError):
            parse_notation(bad)
    assert get_counter("dice.parse.error.format") == 2
    assert get_counter("dice.parse.error.count") == 1
    assert get_counter("dice.parse.error.die_size") == 1


def test_format_notation_canonical_forms():
    assert format_notation(DiceNotation(2, 6, 0)) == "2d6"
    assert format_notation(DiceNotation(2, 6, 3)) == "2d6+3"
    assert format_notation(DiceNotation(1, 20, -2)) == "1d20-2"
    assert str(DiceNotation(3, 8, -1)) == "3d8-1"


@settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(
    count=st.integers(min_value=1, max_value=100),
    sides=st.sampled_from(DIE_SIZES),
    modifier=st.integers(min_value=-10**6, max_value=10**6),
)
def test_parse_reads_back_formatted_notation(count, sides, modifier):
    text = f"{count}d{sides}{modifier:+d}"
    assert parse_notation(text) == DiceNotation(count, sides, modifier)
    assert parse_notation(format_notation(DiceNotation(count, sides, modifier))) == DiceNotation(
        count, sides, modifier
    )
