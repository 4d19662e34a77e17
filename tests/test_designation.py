import pytest

from geometry.errors import InvalidArgument, UnsupportedSeries
from geometry.naca.designation import coerce_designation, decode, digit_count


@pytest.mark.parametrize("code, expected", [
    (0, 4), (12, 4), (9999, 4),
    (10000, 5), (23012, 5),
    (641212, 6),
    (1234567, 7),
    (12345678, 8), (123456789, 8),
])
def test_digit_count(code, expected):
    assert digit_count(code) == expected


def test_coerce_accepts_digit_strings():
    assert coerce_designation("0012") == 12
    assert coerce_designation(" NACA 2412 ") == 2412
    assert coerce_designation("naca23012") == 23012


@pytest.mark.parametrize("value", [-1, True, 12.0, "12a", "", None])
def test_coerce_rejects(value):
    with pytest.raises(InvalidArgument):
        coerce_designation(value)


def test_decode_series4():
    d = decode(2412)
    assert d.series == 4
    assert d.thickness == pytest.approx(0.12)
    assert d.camber == pytest.approx(0.02)
    assert d.position == pytest.approx(0.4)
    assert d.label == "NACA 2412"


def test_leading_zeros_survive():
    d = decode("0012")
    assert d.code == 12
    assert d.series == 4
    assert d.camber == 0.0
    assert d.label == "NACA 0012"


def test_decode_series5_normal_and_reflexed():
    normal = decode(23012)
    assert normal.series == 5
    assert normal.family == 0
    assert normal.camber == pytest.approx(0.3)
    assert normal.position == pytest.approx(0.15)
    assert normal.thickness == pytest.approx(0.12)

    reflexed = decode(23112)
    assert reflexed.family == 1


def test_decode_series6():
    d = decode(641212)
    assert d.series == 6
    assert d.position == pytest.approx(0.4)
    assert d.camber == pytest.approx(0.2)
    assert d.thickness == pytest.approx(0.12)


@pytest.mark.parametrize("code", [
    1234567,    # 7 digits
    12345678,   # 8 digits
    2012,       # camber without position
    23212,      # 5-digit family 2
    20012,      # position digit 0
    26012,      # position digit outside the fits
    21112,      # reflexed position 1
    541212,     # 6-digit not starting with 6
    601212,     # a digit 0
])
def test_unsupported(code):
    with pytest.raises(UnsupportedSeries):
        decode(code)


def test_unsupported_is_a_value_error():
    with pytest.raises(ValueError) as exc:
        decode(1234567)
    assert "designation=1234567" in str(exc.value)
