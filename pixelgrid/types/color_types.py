from __future__ import annotations
from typing import Sequence, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ChannelTuple = Tuple[Scalar, Scalar, Scalar, Scalar]
HSVTuple = Tuple[float, float, float]
BufferLike = Union[bytes, bytearray, memoryview, ndarray, Sequence[int]]

def element_to_array(element: Union[Scalar, ScalarVector, ndarray]) -> np.ndarray:
    """
    Convert a channel element to a numpy array.
    
    Args:
        element: Scalar, tuple, or already an ndarray
        
    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element
    if isinstance(element, (int, float)):
        return np.array([element])
    return np.array(element)
