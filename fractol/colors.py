"""Colour helpers: RGB packing, HSV conversion and escape-time palettes."""

from __future__ import annotations

import math
import struct

_UINT_MASK = 0xFFFFFFFF


def _f32(value: float) -> float:
    """Return *value* rounded to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


_SAT_WARM = _f32(0.6)
_VAL_WARM = _f32(0.9)
_SAT_TEAL = _f32(0.8)
_VAL_TEAL = _f32(0.7)
_SAT_BLUE = _f32(0.7)
_VAL_BLUE = _f32(0.6)


def _to_uint(value: float) -> int:
    """Truncate a number to a 32-bit unsigned integer; non-finite values give 0."""
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return int(value) & _UINT_MASK


def _log(value: float) -> float:
    """Natural logarithm that yields -inf for zero and NaN for negatives."""
    if math.isnan(value):
        return math.nan
    if value > 0:
        return math.log(value)
    if value == 0:
        return -math.inf
    return math.nan


def get_rgb(red: float, green: float, blue: float) -> int:
    """Pack three channel values into a 0xRRGGBB integer."""
    color = _to_uint(red)
    color = ((color << 8) + _to_uint(green)) & _UINT_MASK
    color = ((color << 8) + _to_uint(blue)) & _UINT_MASK
    return color


def hsv_to_rgb(h: float, s: float, v: float) -> int:
    """Convert a hue in degrees, saturation and value in [0, 1] to packed RGB."""
    h = 0.0 if h == 360 else h / 60.0
    sector = math.trunc(h) if math.isfinite(h) else -1
    frac = h - sector
    low = v * (1.0 - s)
    falling = v * (1.0 - s * frac)
    rising = v * (1.0 - s * (1.0 - frac))
    if sector == 0:
        return get_rgb(v * 255, rising * 255, low * 255)
    if sector == 1:
        return get_rgb(falling * 255, v * 255, low * 255)
    if sector == 2:
        return get_rgb(low * 255, v * 255, rising * 255)
    if sector == 3:
        return get_rgb(low * 255, falling * 255, v * 255)
    if sector == 4:
        return get_rgb(rising * 255, low * 255, v * 255)
    return get_rgb(v * 255, low * 255, falling * 255)


def get_color(iteration: int, re: float, im: float, mode: int) -> int:
    """Colour an escaped point using a smoothed iteration count and a palette."""
    smooth = iteration + 1 - _log(_log(abs(re + im))) / math.log(2.0)
    if mode == 4:
        return hsv_to_rgb(0.0 + 5 * smooth, _SAT_WARM, _VAL_WARM)
    if mode == 3:
        return hsv_to_rgb(160.0 + 5 * smooth, _SAT_TEAL, _VAL_TEAL)
    if mode == 2:
        return hsv_to_rgb(220.0 + 5 * smooth, _SAT_BLUE, _VAL_BLUE)
    if mode == 1:
        return get_rgb(0, 2 * smooth, 8 * smooth)
    grey = 5 + 5 * smooth
    return get_rgb(grey, grey, grey)