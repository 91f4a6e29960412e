import pytest

from gridgames.text import compare, is_numeric, leading_number, spaced, to_int


@pytest.mark.parametrize("value", [0, 7, 42, 1234, 2147483647])
def test_leading_number_reads_plain_numbers(value):
    assert leading_number(str(value)) == value


def test_leading_number_skips_prefix_and_stops_after_digits():
    assert leading_number("abc12def34") == 12


def test_leading_number_negative_when_text_starts_with_minus():
    assert leading_number("-17abc") == -17


def test_leading_number_empty_text():
    assert leading_number("") == 0


def test_leading_number_stops_at_newline():
    assert leading_number("9\n...\n") == 9


@pytest.mark.parametrize("value", [0, 5, 123, 65535, 2147483647])
def test_to_int_round_trip(value):
    assert to_int(str(value)) == value


def test_to_int_stops_at_first_non_digit():
    assert to_int("123abc") == to_int("123")


def test_to_int_signed_text_gives_zero():
    assert to_int("-5") == 0


def test_to_int_overflow_gives_zero():
    assert to_int("2147483648") == 0


@pytest.mark.parametrize(
    "text, expected",
    [("123", True), ("-12", True), ("12a", False), ("", True), ("1-2", False)],
)
def test_is_numeric(text, expected):
    assert is_numeric(text) is expected


@pytest.mark.parametrize(
    "first, second, expected",
    [("abc", "abc", 0), ("abd", "abc", 1), ("abc", "abd", -1), ("ab", "abc", -1), ("abc", "ab", 1)],
)
def test_compare(first, second, expected):
    assert compare(first, second) == expected


def test_compare_is_antisymmetric():
    assert compare("-h", "-x") == -compare("-x", "-h")


def test_spaced_example():
    assert spaced("ab") == "a b "


def test_spaced_doubles_length_and_keeps_characters():
    text = "..x.o"
    result = spaced(text)
    assert len(result) == 2 * len(text)
    assert result[::2] == text
    assert set(result[1::2]) == {" "}