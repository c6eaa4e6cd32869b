from .dimension import get_dimension, is_integral

__all__ = ['get_dimension', 'is_integral']
