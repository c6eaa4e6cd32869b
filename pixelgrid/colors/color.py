from __future__ import annotations
from typing import Iterator
from ..conversions import hsv_to_rgb, rgb_to_hsv, hex_to_rgba, rgba_to_hex
from ..types.format_type import CHANNEL_MAX
from ..types.color_types import ChannelTuple, HSVTuple, Scalar


class Color:
    """
    A mutable RGBA color.

    Channels are stored verbatim on the canonical 0-255 scale; the
    constructor neither clamps nor validates. Values are only rounded and
    clamped where they leave the object (hex rendering, buffer encoding).

    A ``Color`` held by a :class:`~pixelgrid.PixelGrid` is the grid cell
    itself: writing ``color.r`` through a reference returned by
    ``PixelGrid.get`` changes the pixel.
    """

    __slots__ = ('r', 'g', 'b', 'a')

    def __init__(self, r: Scalar, g: Scalar, b: Scalar, a: Scalar = CHANNEL_MAX) -> None:
        self.r = r
        self.g = g
        self.b = b
        self.a = a

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_hex(cls, hex_string: str) -> Color:
        """
        Parse ``#RRGGBB`` or ``#RRGGBBAA`` (``#`` optional, case-insensitive).

        Alpha defaults to 255 when the fourth byte is absent. Input that does
        not match fails open: the result is opaque black ``Color(0, 0, 0, 255)``
        and a ``UserWarning`` is emitted rather than an exception raised.
        """
        return cls(*hex_to_rgba(hex_string))

    @classmethod
    def from_hsv(cls, h: Scalar, s: Scalar, v: Scalar) -> Color:
        """
        Build a color from hue (degrees), saturation (0-1) and value (0-255).

        Channels are rounded to the nearest integer. A non-positive
        saturation gives the opaque grey ``Color(v, v, v, 255)``.
        """
        r, g, b = hsv_to_rgb(h, s, v)
        return cls(round(r), round(g), round(b))

    # ------------------ CONVERSIONS ------------------
    def to_hex(self) -> str:
        """Return ``#RRGGBBAA`` with uppercase digits, one byte per channel."""
        return rgba_to_hex(self.r, self.g, self.b, self.a)

    def to_hsv(self) -> HSVTuple:
        """Return ``(h, s, v)``; alpha is dropped."""
        return rgb_to_hsv(self.r, self.g, self.b)

    # ------------------ ACCESSORS ------------------
    @property
    def value(self) -> ChannelTuple:
        return (self.r, self.g, self.b, self.a)

    @property
    def alpha(self) -> Scalar:
        return self.a

    def with_alpha(self, alpha: Scalar) -> Color:
        """Return a new color with the same RGB and the given alpha."""
        return self.__class__(self.r, self.g, self.b, alpha)

    def copy(self) -> Color:
        return self.__class__(self.r, self.g, self.b, self.a)

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.value == other.value

    # Mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b}, {self.a})"
