"""
pixelgrid Color Conversions
===========================

Conversion routines between the RGBA channel representation and hex strings
or HSV, with scalar and vectorized (numpy) variants.

All RGB values live on the canonical channel scale (integers 0-255). HSV
uses hue in degrees, saturation in [0, 1] and value on the channel scale.

Conversion Functions
-------------------

HSV → RGB:
    hsv_to_rgb(h, s, v)
        Scalar six-sector conversion
    np_hsv_to_rgb(h, s, v)
        Vectorized conversion

RGB → HSV:
    rgb_to_hsv(r, g, b)
        Scalar conversion
    np_rgb_to_hsv(r, g, b)
        Vectorized conversion

Hex:
    parse_hex(hex_string)
        Strict parser, returns None on failure
    hex_to_rgba(hex_string)
        Lenient parser, falls back to opaque black with a warning
    rgba_to_hex(r, g, b, a)
        ``#RRGGBBAA`` rendering

Examples
--------
>>> from pixelgrid.conversions import hsv_to_rgb, rgb_to_hsv
>>> hsv_to_rgb(0, 1, 255)
(255.0, 0.0, 0.0)
>>> rgb_to_hsv(255, 0, 0)
(0.0, 1.0, 255.0)
"""

from .to_rgb import hsv_to_rgb, np_hsv_to_rgb
from .to_hsv import rgb_to_hsv, np_rgb_to_hsv
from .hex import parse_hex, hex_to_rgba, rgba_to_hex, channel_to_hex

__all__ = [
    'hsv_to_rgb',
    'np_hsv_to_rgb',
    'rgb_to_hsv',
    'np_rgb_to_hsv',
    'parse_hex',
    'hex_to_rgba',
    'rgba_to_hex',
    'channel_to_hex',
]
