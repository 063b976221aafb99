import pytest

from heroswap.printf import printf, sprintf


def test_plain_text_passes_through():
    assert sprintf("sa\n") == "sa\n"


def test_percent_literal():
    assert sprintf("100%%") == "100%"


@pytest.mark.parametrize("value", [0, 7, -42, 2147483647, -2147483648])
def test_decimal_round_trip(value):
    assert int(sprintf("%d", value)) == value
    assert sprintf("%i", value) == sprintf("%d", value)


def test_decimal_wraps_to_32_bits():
    assert int(sprintf("%d", 2147483648)) == -2147483648


@pytest.mark.parametrize("value", [0, 1, 15, 16, 255, 4096, 0xDEADBEEF])
def test_hex_round_trip(value):
    lower = sprintf("%x", value)
    upper = sprintf("%X", value)
    assert int(lower, 16) == value
    assert lower.upper() == upper
    assert lower == lower.lower()


def test_unsigned_of_negative_is_modular():
    assert int(sprintf("%u", -1)) == 0xFFFFFFFF


def test_pointer_has_prefix():
    text = sprintf("%p", 0xABC)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0xABC


def test_null_string():
    assert sprintf("[%s]", None) == "[(null)]"


def test_char_from_int_and_str():
    assert sprintf("%c%c", ord("o"), "k") == "ok"


def test_unknown_conversion_is_dropped():
    assert sprintf("a%zb") == "ab"


def test_mixed_arguments_in_order():
    assert sprintf("%s=%d", "moves", 12) == "moves=12"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_printf_writes_and_counts(capsys):
    count = printf("%d\n", 3)
    out = capsys.readouterr().out
    assert out == "3\n"
    assert count == len(out)