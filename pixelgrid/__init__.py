"""
pixelgrid - RGBA Pixel Buffer Abstraction
=========================================

Turns a flat, interleaved RGBA byte buffer into a randomly addressable grid
of colors, and back.

Key Features
------------
- Byte-exact decode/encode of row-major RGBA buffers
- Bounds-checked, non-raising pixel access
- Grid-wide fill, clear and invert
- Hex and HSV color conversions
- Pluggable rendering surfaces (Pillow by default)

Quick Start
-----------
>>> from pixelgrid import PixelGrid, Color
>>>
>>> grid = PixelGrid(bytes([255, 0, 0, 255, 0, 255, 0, 128]), 2, 1)
>>> grid.get(1, 0)
Color(0, 255, 0, 128)
>>> grid.invert()
>>> grid.encode_to_buffer()
b'\\x00\\xff\\xff\\xff\\xff\\x00\\xff\\x80'
>>>
>>> Color.from_hex("#FF008080").value
(255, 0, 128, 128)

Modules
-------
- colors: the Color class
- grid: PixelGrid and rendering-surface providers
- conversions: hex and HSV conversion functions
- errors: ShapeMismatch
"""

from .colors.color import Color
from .grid.pixel_grid import PixelGrid
from .grid.surface import SurfaceProvider, PillowSurfaceProvider
from .errors import ShapeMismatch
from .types.format_type import BYTES_PER_PIXEL, CHANNEL_MAX

from .conversions import (
    hsv_to_rgb, np_hsv_to_rgb,
    rgb_to_hsv, np_rgb_to_hsv,
    parse_hex, rgba_to_hex,
)

__version__ = "1.0.0"

__all__ = [
    'Color',
    'PixelGrid',
    'SurfaceProvider',
    'PillowSurfaceProvider',
    'ShapeMismatch',
    'BYTES_PER_PIXEL',
    'CHANNEL_MAX',
    'hsv_to_rgb',
    'np_hsv_to_rgb',
    'rgb_to_hsv',
    'np_rgb_to_hsv',
    'parse_hex',
    'rgba_to_hex',
]
