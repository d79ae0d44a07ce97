import pytest

from candle.color import Color, complementary, darken, interpolate, lighten

SAMPLE = Color(200, 100, 30, 77)


def test_invalid_channels_raise():
    with pytest.raises(ValueError):
        Color(256, 0, 0)
    with pytest.raises(ValueError):
        Color(0, -1, 0)
    with pytest.raises(ValueError):
        Color(0, 0, 1.5)


def test_default_alpha_is_opaque():
    assert Color(1, 2, 3).a == 255


def test_darken_zero_is_identity():
    assert darken(SAMPLE, 0.0) == SAMPLE


def test_darken_full_gives_black_keeping_alpha():
    assert darken(SAMPLE, 1.0) == Color(0, 0, 0, SAMPLE.a)


def test_darken_never_increases_channels():
    d = darken(SAMPLE, 0.3)
    assert d.r <= SAMPLE.r and d.g <= SAMPLE.g and d.b <= SAMPLE.b
    assert d.a == SAMPLE.a


def test_lighten_zero_is_identity():
    assert lighten(SAMPLE, 0.0) == SAMPLE


def test_lighten_saturates():
    assert lighten(Color.WHITE, 0.5) == Color.WHITE
    assert lighten(SAMPLE, 10.0).r == 255


def test_interpolate_endpoints():
    assert interpolate(SAMPLE, Color.CYAN, 0.0) == SAMPLE
    assert interpolate(SAMPLE, Color.CYAN, 1.0) == Color.CYAN


def test_interpolate_is_between():
    mid = interpolate(Color.BLACK, Color.WHITE, 0.5)
    assert 0 < mid.r < 255
    assert mid.r == mid.g == mid.b


def test_complementary_twice_is_identity():
    assert complementary(complementary(SAMPLE)) == SAMPLE


def test_complementary_of_black_is_white():
    assert complementary(Color.BLACK) == Color.WHITE
    assert complementary(Color.TRANSPARENT).a == 0


def test_with_alpha():
    assert Color.RED.with_alpha(10) == Color(255, 0, 0, 10)