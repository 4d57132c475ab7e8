import pytest

from ftkit.numbers import atod, atof, atoi, itoa, power


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  \t\n-17abc", -17),
        ("+8", 8),
        ("123 456", 123),
        ("-2147483648", -2147483648),
    ],
)
def test_atoi_parses_leading_integer(text, expected):
    assert atoi(text) == expected


def test_atoi_without_digits():
    assert atoi("abc") == atoi("") == atoi("+-5")
    assert atoi("") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648


def test_atoi_long_overflow():
    assert atoi("99999999999999999999") == -1
    assert atoi("-99999999999999999999") == 0


@pytest.mark.parametrize("n", [0, 1, -1, 7, -42, 1000000000, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_minimum():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2**31)


@pytest.mark.parametrize(
    "text, expected",
    [("3.5", 3.5), ("-0.5", -0.5), ("  +2,25xyz", 2.25), ("10", 10.0), (".75", 0.75)],
)
def test_atod_parses(text, expected):
    assert atod(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["3.5", "-0.5", "2,25", "10", "0.1", "123.456"])
def test_atof_close_to_atod(text):
    assert atof(text) == pytest.approx(atod(text), rel=1e-6)


def test_atof_is_single_precision():
    assert atof("0.1") != atod("0.1")
    assert atof("0.1") == pytest.approx(0.1, rel=1e-7)


def test_atof_huge_value_is_infinite():
    result = atof("1" + "0" * 50)
    assert result == float("inf")


def test_real_parsers_without_digits():
    assert atod("abc") == 0.0
    assert atof("-") == 0.0


def test_power_edges():
    assert power(5, -1) == 0
    assert power(5, 0) == 1
    assert power(7, 1) == 7


@pytest.mark.parametrize("base", [-3, 2, 10])
def test_power_recurrence(base):
    for exponent in range(6):
        assert power(base, exponent + 1) == base * power(base, exponent)