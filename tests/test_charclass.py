import pytest

from wordlegui.charclass import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_space,
    to_lower,
    to_upper,
)

ASCII = [chr(code) for code in range(128)]


@pytest.mark.parametrize("ch", ASCII)
def test_is_alpha_matches_ascii_letters(ch):
    assert is_alpha(ch) == ch.isalpha()


@pytest.mark.parametrize("ch", ASCII)
def test_is_digit_matches_ascii_digits(ch):
    assert is_digit(ch) == ch.isdigit()


@pytest.mark.parametrize("ch", ASCII)
def test_is_alnum_is_letter_or_digit(ch):
    assert is_alnum(ch) == (is_alpha(ch) or is_digit(ch))


@pytest.mark.parametrize("ch", ASCII)
def test_is_print_matches_printable_ascii(ch):
    assert is_print(ch) == ch.isprintable()


def test_non_ascii_letters_and_digits_are_rejected():
    assert is_alpha("é") is False
    assert is_digit("²") is False
    assert is_alnum("é") is False


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


@pytest.mark.parametrize("ch", list(" \t\n\r\v\f"))
def test_is_space_accepts_the_six_spaces(ch):
    assert is_space(ch) is True


@pytest.mark.parametrize("ch", ["\x1c", "\x1f", "a", "\x00", "\xa0"])
def test_is_space_rejects_others(ch):
    assert is_space(ch) is False


@pytest.mark.parametrize("ch", ASCII)
def test_case_conversion_matches_ascii(ch):
    assert to_upper(ch) == ch.upper()
    assert to_lower(ch) == ch.lower()


def test_case_conversion_round_trip_on_letters():
    for code in range(ord("a"), ord("z") + 1):
        letter = chr(code)
        assert to_lower(to_upper(letter)) == letter
        assert to_upper(letter) != letter


def test_case_conversion_leaves_non_ascii_alone():
    assert to_upper("ß") == "ß"
    assert to_lower("É") == "É"


def test_case_conversion_keeps_integer_kind():
    assert to_upper(ord("q")) == ord(to_upper("q"))
    assert to_lower(ord("Q")) == ord(to_lower("Q"))
    assert to_upper(ord("1")) == ord("1")


def test_rejects_multi_character_strings():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_rejects_other_types():
    with pytest.raises(TypeError):
        is_digit(1.5)
    with pytest.raises(TypeError):
        is_space(None)