import math

import pytest

from n8lang.convert import to_bytes, to_double, translate_digit


def test_to_bytes_is_big_endian_ieee():
    assert to_bytes(1.0) == b"\x3f\xf0\x00\x00\x00\x00\x00\x00"


@pytest.mark.parametrize("number", [0.0, 1.5, -2.25, 1e300, -1e-300, 123456.789])
def test_bytes_round_trip(number):
    data = to_bytes(number)
    assert len(data) == 8
    assert to_double(data) == number


def test_round_trip_keeps_infinity():
    assert to_double(to_bytes(math.inf)) == math.inf


@pytest.mark.parametrize("data", [b"", b"\x00" * 7, b"\x00" * 9, None])
def test_to_double_requires_eight_bytes(data):
    with pytest.raises(ValueError):
        to_double(data)


def test_all_bases_agree():
    values = {
        translate_digit("0b1010"),
        translate_digit("0t101"),
        translate_digit("0c12"),
        translate_digit("0xa"),
        translate_digit("0xA"),
        translate_digit("10"),
    }
    assert values == {10.0}


def test_decimal_literals():
    assert translate_digit("3.25") == 3.25
    assert translate_digit("1e+3") == translate_digit("1000")
    assert translate_digit("25e-1") == translate_digit("2.5")


def test_partial_parse_like_source():
    assert translate_digit("0b1012") == translate_digit("0b101")
    assert translate_digit("7e+") == translate_digit("7")


def test_empty_image_rejected():
    with pytest.raises(ValueError):
        translate_digit("")


@pytest.mark.parametrize("image", ["0b", "0x", "0t9", "abc"])
def test_invalid_digits_rejected(image):
    with pytest.raises(ValueError):
        translate_digit(image)


def test_integer_overflow_rejected():
    with pytest.raises(OverflowError):
        translate_digit("0xFFFFFFFFFF")