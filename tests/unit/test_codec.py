import pytest

from lib.numerals.codec import (
    DIGIT_VALUES, MAX_VALUE, MIN_VALUE, FormatError, NumeralError, RangeError, decode, encode,
)


def test_round_trip_whole_range():
    for n in range(MIN_VALUE, MAX_VALUE + 1):
        roman = encode(n)
        assert decode(roman) == n
        assert encode(decode(roman)) == roman


def test_digit_table_is_strictly_descending():
    values = [v for v, _ in DIGIT_VALUES]
    assert values == sorted(values, reverse=True)
    assert len(set(values)) == len(values) == 13


@pytest.mark.parametrize(
    "value, roman",
    [
        (1, "I"), (10, "X"), (50, "L"), (100, "C"),
        (4, "IV"), (9, "IX"), (40, "XL"), (90, "XC"), (400, "CD"), (900, "CM"),
        (49, "XLIX"), (1994, "MCMXCIV"), (3999, "MMMCMXCIX"),
    ],
)
def test_encode(value, roman):
    assert encode(value) == roman


@pytest.mark.parametrize("value", [0, 4000, -1, 1.5, 10.0, "10", None, True])
def test_encode_rejects(value):
    with pytest.raises(RangeError, match="value must be an integer between 1 and 3999"):
        encode(value)


@pytest.mark.parametrize("roman, value", [("I", 1), ("X", 10), ("MMM", 3000), ("IV", 4),
                                          ("XLIX", 49), ("MCMXCIV", 1994)])
def test_decode(roman, value):
    assert decode(roman) == value


@pytest.mark.parametrize(
    "roman",
    ["IIII", "VIIII", "XVV", "VV", "LL", "DD", "XXXX", "CCCC", "MMMM",
     "IC", "IL", "ID", "IM", "VX", "XM", "IXZ", "XIIA", "mcmxciv", "Mcm", " X", "X "],
)
def test_decode_rejects_non_canonical(roman):
    with pytest.raises(FormatError, match="invalid or out-of-range Roman numeral format"):
        decode(roman)


@pytest.mark.parametrize("value", ["", None, 12, b"X"])
def test_decode_requires_non_empty_string(value):
    with pytest.raises(FormatError, match="input must be a non-empty string"):
        decode(value)


def test_error_kinds():
    assert issubclass(RangeError, NumeralError)
    assert issubclass(FormatError, NumeralError)
    assert issubclass(NumeralError, ValueError)
    assert RangeError.code == "range"
    assert FormatError.code == "format"
