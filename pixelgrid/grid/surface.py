"""
Rendering-surface collaborators for PixelGrid.

A surface provider turns image-like objects into raw RGBA buffers and raw
buffers back into the provider's native image type. PixelGrid never picks
one from the host environment; callers pass a provider explicitly, or get
:class:`PillowSurfaceProvider` by default.
"""

from __future__ import annotations

from typing import Any, Protocol, Tuple, runtime_checkable

import numpy as np
from numpy import ndarray
from PIL import Image

from ..types.color_types import BufferLike


@runtime_checkable
class SurfaceProvider(Protocol):
    """
    Protocol for off-screen rendering surfaces.

    Buffers exchanged with a provider are flat RGBA bytes, four per pixel,
    pixels in row-major order.
    """

    def create_surface(self, width: int, height: int) -> Any:
        """Create a transparent drawable surface of the given size."""
        ...

    def draw_image(self, surface: Any, image: Any, x: int = 0, y: int = 0) -> None:
        """Draw ``image`` onto ``surface`` with its top-left corner at (x, y)."""
        ...

    def read_pixels(self, surface: Any) -> bytes:
        """Read the whole surface back as a flat RGBA buffer."""
        ...

    def create_image_data(self, buffer: BufferLike, width: int, height: int) -> Any:
        """Wrap a flat RGBA buffer into the provider's native image type."""
        ...


def image_size(image: Any) -> Tuple[int, int]:
    """
    Return ``(width, height)`` of an image-like object.

    Understands numpy arrays shaped (H, W[, C]), objects with ``width`` and
    ``height`` attributes, and objects with a ``size`` pair.
    """
    if isinstance(image, ndarray):
        if image.ndim < 2:
            raise ValueError(f"Image array must be at least 2D, got shape {image.shape}")
        return int(image.shape[1]), int(image.shape[0])
    if hasattr(image, "width") and hasattr(image, "height"):
        return int(image.width), int(image.height)
    if hasattr(image, "size"):
        width, height = image.size
        return int(width), int(height)
    raise TypeError(f"{type(image).__name__} does not expose width/height")


class PillowSurfaceProvider:
    """SurfaceProvider backed by ``PIL.Image`` in RGBA mode."""

    mode = "RGBA"

    def create_surface(self, width: int, height: int) -> Image.Image:
        return Image.new(self.mode, (width, height), (0, 0, 0, 0))

    def draw_image(self, surface: Image.Image, image: Any, x: int = 0, y: int = 0) -> None:
        source = self._as_pil(image)
        if source.mode != self.mode:
            source = source.convert(self.mode)
        # Pixels are copied, not blended; the surface starts transparent
        surface.paste(source, (x, y))

    def read_pixels(self, surface: Image.Image) -> bytes:
        if surface.mode != self.mode:
            surface = surface.convert(self.mode)
        return surface.tobytes()

    def create_image_data(self, buffer: BufferLike, width: int, height: int) -> Image.Image:
        return Image.frombytes(self.mode, (width, height), bytes(buffer))

    @staticmethod
    def _as_pil(image: Any) -> Image.Image:
        if isinstance(image, Image.Image):
            return image
        if isinstance(image, ndarray):
            return Image.fromarray(np.ascontiguousarray(image, dtype=np.uint8))
        raise TypeError(
            f"PillowSurfaceProvider cannot draw {type(image).__name__}; "
            "pass a PIL image or a uint8 array"
        )
