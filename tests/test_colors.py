import pytest

from fractol.colors import get_color, get_rgb, hsv_to_rgb


def _channels(color):
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def test_get_rgb_packs_red():
    assert get_rgb(255, 0, 0) == 0xFF0000


@pytest.mark.parametrize("rgb", [(1, 2, 3), (0, 0, 0), (255, 255, 255), (18, 200, 7)])
def test_get_rgb_round_trip(rgb):
    assert _channels(get_rgb(*rgb)) == rgb


def test_get_rgb_truncates_floats():
    assert get_rgb(10.9, 20.2, 30.7) == get_rgb(10, 20, 30)


def test_get_rgb_stays_within_32_bits():
    assert get_rgb(1 << 20, 1 << 20, 1 << 20) <= 0xFFFFFFFF


def test_hsv_pure_red():
    assert hsv_to_rgb(0, 1, 1) == 0xFF0000


def test_hsv_pure_green():
    assert hsv_to_rgb(120, 1, 1) == 0x00FF00


def test_hsv_pure_blue():
    assert hsv_to_rgb(240, 1, 1) == 0x0000FF


def test_hsv_360_wraps_to_zero():
    assert hsv_to_rgb(360, 0.5, 0.8) == hsv_to_rgb(0, 0.5, 0.8)


@pytest.mark.parametrize("hue", [0, 45, 100, 200, 300, 359])
def test_hsv_zero_value_is_black(hue):
    assert hsv_to_rgb(hue, 0.7, 0.0) == 0


@pytest.mark.parametrize("hue", [10, 90, 150, 210, 270, 330])
def test_hsv_zero_saturation_is_grey(hue):
    r, g, b = _channels(hsv_to_rgb(hue, 0.0, 0.5))
    assert r == g == b


def test_hsv_beyond_full_circle_uses_last_sector():
    assert hsv_to_rgb(400, 1, 1) == hsv_to_rgb(300, 1, 1)


@pytest.mark.parametrize("iteration", [1, 3, 10])
def test_mode_zero_is_grey(iteration):
    r, g, b = _channels(get_color(iteration, 3.0, 2.0, 0))
    assert r == g == b


def test_mode_zero_brightens_with_iterations():
    darker = _channels(get_color(1, 3.0, 2.0, 0))[0]
    brighter = _channels(get_color(5, 3.0, 2.0, 0))[0]
    assert brighter > darker


def test_mode_one_has_no_red():
    r, g, b = _channels(get_color(4, 3.0, 2.0, 1))
    assert r == 0
    assert b >= g


@pytest.mark.parametrize("mode", [0, 1, 2, 3, 4])
def test_degenerate_input_does_not_raise(mode):
    assert 0 <= get_color(2, 0.1, 0.2, mode) <= 0xFFFFFFFF