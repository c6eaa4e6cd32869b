"""
pixelgrid Color Classes
=======================

``Color`` stores four channel values (R, G, B, A) on the 0-255 scale and
converts to and from hex strings and HSV.

Usage
-----
>>> from pixelgrid.colors import Color
>>> red = Color(255, 0, 0)
>>> red.alpha
255
>>> red.to_hex()
'#FF0000FF'
>>> Color.from_hex("#FF008080").value
(255, 0, 128, 128)
>>> Color.from_hsv(120, 1, 255).value
(0, 255, 0, 255)

Notes
-----
- Colors are mutable; grid cells are shared by reference
- Unparseable hex strings fall back to opaque black with a warning
"""

from .color import Color


__all__ = ['Color']
