"""
PixelGrid Module
================

Decodes a flat, interleaved RGBA buffer into a 2D grid of :class:`Color`
cells, and encodes it back.

Buffer layout
-------------
``width * height * 4`` bytes, four per pixel in R, G, B, A order, pixels in
row-major order (all of row 0 left to right, then row 1, ...). The pixel at
(x, y) starts at byte ``(y * width + x) * 4``.

Cells are addressed ``grid[y][x]``; the public accessors take ``(x, y)``.
"""

from __future__ import annotations

import warnings
from typing import Any, Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function

from ..colors.color import Color
from ..conversions import np_hsv_to_rgb, np_rgb_to_hsv
from ..errors import ShapeMismatch
from ..types.color_types import BufferLike, Scalar
from ..types.format_type import BYTES_PER_PIXEL, CHANNEL_MAX
from ..utils import get_dimension, is_integral
from .surface import PillowSurfaceProvider, SurfaceProvider, image_size

ColorLike = Union[Color, Sequence[Scalar]]

_np_clamp = bound_type_to_np_function[BoundType.CLAMP]


def _validate_dimensions(width: Any, height: Any) -> None:
    for name, value in (("width", width), ("height", height)):
        if not is_integral(value):
            raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")


def _as_byte_array(buffer: BufferLike) -> NDArray:
    """View or convert ``buffer`` as a flat uint8 array."""
    if isinstance(buffer, (bytes, bytearray, memoryview)):
        return np.frombuffer(buffer, dtype=np.uint8)

    arr = np.asarray(buffer)
    if arr.dtype != np.uint8:
        # Same saturating behaviour as a clamped byte array
        arr = np.nan_to_num(np.rint(arr.astype(float)), nan=0.0)
        arr = _np_clamp(arr, 0, CHANNEL_MAX).astype(np.uint8)
    return arr.reshape(-1)


def _as_color(color: ColorLike) -> Color:
    if isinstance(color, Color):
        return color
    dim = get_dimension(color)
    if dim not in (3, 4):
        raise ValueError(f"Expected an RGB or RGBA sequence, got {dim} channel(s)")
    return Color(*color)


class PixelGrid:
    """
    A ``height`` x ``width`` grid of :class:`Color` cells.

    Dimensions are fixed at construction. ``get`` hands out live references
    to the stored colors, so mutating a returned color mutates the grid.
    Out-of-bounds ``get`` returns None and out-of-bounds ``set`` is ignored;
    neither raises.

    Not thread-safe; callers sharing a grid across threads must lock around it.
    """

    __slots__ = ('_width', '_height', '_data')

    def __init__(self, buffer: BufferLike, width: int, height: int) -> None:
        """
        Decode ``buffer`` into a grid.

        Args:
            buffer: Flat RGBA bytes (bytes, bytearray, memoryview, numpy
                array or a sequence of ints), length ``width * height * 4``.
            width: Image width in pixels, positive.
            height: Image height in pixels, positive.

        Raises:
            TypeError: width or height is not an integer.
            ValueError: width or height is not positive.
            ShapeMismatch: buffer length differs from ``width * height * 4``.
        """
        _validate_dimensions(width, height)
        width, height = int(width), int(height)

        flat = _as_byte_array(buffer)
        expected = width * height * BYTES_PER_PIXEL
        if flat.size != expected:
            raise ShapeMismatch(expected, int(flat.size), width, height)

        values = flat.tolist()
        data: List[List[Color]] = []
        for y in range(height):
            row = []
            for x in range(width):
                i = (y * width + x) * BYTES_PER_PIXEL
                row.append(Color(values[i], values[i + 1], values[i + 2], values[i + 3]))
            data.append(row)

        self._width = width
        self._height = height
        self._data = data

    # ------------------ ALTERNATE CONSTRUCTORS ------------------
    @classmethod
    def from_image(cls, image: Any, provider: Optional[SurfaceProvider] = None) -> PixelGrid:
        """
        Rasterize an image-like object and decode its pixels.

        The image is drawn at (0, 0) onto a transparent surface of the same
        size obtained from ``provider`` (a :class:`PillowSurfaceProvider`
        when omitted), and the surface's RGBA buffer is decoded.
        """
        provider = provider or PillowSurfaceProvider()
        width, height = image_size(image)
        surface = provider.create_surface(width, height)
        provider.draw_image(surface, image, 0, 0)
        return cls(provider.read_pixels(surface), width, height)

    @classmethod
    def from_array(cls, arr: NDArray) -> PixelGrid:
        """Build a grid from an array shaped (height, width, 4)."""
        arr = np.asarray(arr)
        if arr.ndim != 3:
            raise ValueError(f"Expected an array shaped (height, width, 4), got {arr.shape}")
        height, width = arr.shape[:2]
        if arr.shape[2] != BYTES_PER_PIXEL:
            raise ShapeMismatch(width * height * BYTES_PER_PIXEL, int(arr.size), width, height)
        return cls(arr.reshape(-1), width, height)

    @classmethod
    def from_hsv_array(cls, hsv: NDArray, alpha: Scalar = CHANNEL_MAX) -> PixelGrid:
        """
        Build a grid from an array shaped (height, width, 3) of HSV values.

        Hue in degrees, saturation in [0, 1], value on the 0-255 scale.
        Every pixel gets the same ``alpha``.
        """
        hsv = np.asarray(hsv, dtype=float)
        if hsv.ndim != 3 or hsv.shape[2] != 3:
            raise ValueError(f"Expected an array shaped (height, width, 3), got {hsv.shape}")
        rgb = np_hsv_to_rgb(hsv[..., 0], hsv[..., 1], hsv[..., 2])
        alpha_array = np.full(rgb.shape[:-1] + (1,), alpha, dtype=float)
        return cls.from_array(np.concatenate([np.rint(rgb), alpha_array], axis=-1))

    @classmethod
    def blank(cls, width: int, height: int, color: Optional[ColorLike] = None) -> PixelGrid:
        """Create a grid filled with ``color`` (transparent black by default)."""
        _validate_dimensions(width, height)
        grid = cls(bytes(int(width) * int(height) * BYTES_PER_PIXEL), width, height)
        if color is not None:
            grid.fill(color)
        return grid

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """(height, width), matching the row-major cell layout."""
        return (self._height, self._width)

    # ------------------ PIXEL ACCESS ------------------
    def in_bounds(self, x: int, y: int) -> bool:
        """True for integer coordinates inside the grid; anything else is absent."""
        if not (is_integral(x) and is_integral(y)):
            return False
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, x: int, y: int) -> Optional[Color]:
        """Return the stored color at (x, y), or None when out of bounds."""
        if self.in_bounds(x, y):
            return self._data[y][x]
        return None

    def set(self, x: int, y: int, color: ColorLike) -> None:
        """Store ``color`` at (x, y); out-of-bounds writes are ignored."""
        if self.in_bounds(x, y):
            self._data[y][x] = _as_color(color)

    # ------------------ GRID OPERATIONS ------------------
    def fill(self, color: ColorLike) -> None:
        """
        Set every cell to ``color``.

        Each cell receives its own copy, so later changes to ``color`` or to
        any single cell do not spread to the rest of the grid.
        """
        color = _as_color(color)
        for row in self._data:
            for x in range(self._width):
                row[x] = color.copy()

    def clear(self) -> None:
        """Fill with transparent black (0, 0, 0, 0)."""
        self.fill(Color(0, 0, 0, 0))

    def invert(self) -> None:
        """Replace R, G, B with ``255 - channel`` in place; alpha is untouched."""
        for row in self._data:
            for color in row:
                color.r = CHANNEL_MAX - color.r
                color.g = CHANNEL_MAX - color.g
                color.b = CHANNEL_MAX - color.b

    # ------------------ ENCODING ------------------
    def to_array(self) -> NDArray:
        """
        Return the pixels as a new uint8 array shaped (height, width, 4).

        Channel values are rounded and clamped to [0, 255] and NaN becomes 0;
        a warning is emitted when either changes anything.
        """
        values = np.array([[cell.value for cell in row] for row in self._data], dtype=float)
        values = np.rint(values)
        nan_mask = np.isnan(values)
        if nan_mask.any() or values.min(where=~nan_mask, initial=0) < 0 \
                or values.max(where=~nan_mask, initial=0) > CHANNEL_MAX:
            warnings.warn(
                "Channel values outside [0, 255] or NaN were clamped while encoding",
                stacklevel=3,
            )
            values = _np_clamp(np.nan_to_num(values, nan=0.0), 0, CHANNEL_MAX)
        return values.astype(np.uint8)

    def encode_to_buffer(self) -> bytes:
        """
        Encode the grid into a freshly allocated flat RGBA buffer.

        Inverse of the constructor: ``PixelGrid(buf, w, h).encode_to_buffer()``
        is byte-identical to ``buf``.
        """
        return self.to_array().tobytes()

    def to_image_data(self, provider: Optional[SurfaceProvider] = None) -> Any:
        """Encode and wrap the buffer in the provider's native image type."""
        provider = provider or PillowSurfaceProvider()
        return provider.create_image_data(self.encode_to_buffer(), self._width, self._height)

    def to_hsv_array(self) -> NDArray:
        """Return HSV values shaped (height, width, 3); alpha is dropped."""
        rgb = self.to_array().astype(float)
        return np_rgb_to_hsv(rgb[..., 0], rgb[..., 1], rgb[..., 2])

    def __array__(self, dtype=None, copy=None) -> NDArray:
        # Cells are Python objects, so an array is always a fresh copy
        if copy is False:
            raise ValueError("PixelGrid cannot be exposed as an array without copying")
        arr = self.to_array()
        return arr if dtype is None else arr.astype(dtype)

    # ------------------ PROTOCOLS ------------------
    def __iter__(self) -> Iterator[List[Color]]:
        return iter(self._data)

    def __len__(self) -> int:
        return self._height

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return self.shape == other.shape and all(
            a == b for row_a, row_b in zip(self._data, other._data) for a, b in zip(row_a, row_b)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PixelGrid(width={self._width}, height={self._height})"
