from .pixel_grid import PixelGrid
from .surface import SurfaceProvider, PillowSurfaceProvider, image_size

__all__ = ['PixelGrid', 'SurfaceProvider', 'PillowSurfaceProvider', 'image_size']
