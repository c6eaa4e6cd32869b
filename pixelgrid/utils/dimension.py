from typing import Any
from collections.abc import Sized
import numbers

def get_dimension(element: Any) -> int:
    if element is None:
        return 0
    if isinstance(element, Sized):
        return len(element)
    return 1

def is_integral(value: Any) -> bool:
    """True for Python and numpy integers; bools are rejected."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)
