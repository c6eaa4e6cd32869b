import math
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import Scalar, element_to_array
from ..types.format_type import HUE_360


def hsv_to_rgb(h: Scalar, s: Scalar, v: Scalar) -> Tuple[float, float, float]:
    """
    HSV to RGB using the six-sector algorithm.

    Input:
        h in degrees [0, 360); any ``h >= 360`` is replaced by 0,
        so 420 behaves like 0, not like 60
        s in [0, 1]
        v on the scale of the output channels (e.g. 0..255)

    Output:
        (r, g, b) as floats on the scale of ``v``.
        Sector 5 and negative hues use (v, p, q).
    """
    if s <= 0.0:
        return float(v), float(v), float(v)

    hh = float(h)
    if hh >= HUE_360:
        hh = 0.0

    hh /= 60.0
    i = math.floor(hh)
    ff = hh - i
    p = v * (1.0 - s)
    q = v * (1.0 - (s * ff))
    t = v * (1.0 - (s * (1.0 - ff)))

    if i == 0:
        r, g, b = v, t, p
    elif i == 1:
        r, g, b = q, v, p
    elif i == 2:
        r, g, b = p, v, t
    elif i == 3:
        r, g, b = p, q, v
    elif i == 4:
        r, g, b = t, p, v
    else:
        r, g, b = v, p, q

    return float(r), float(g), float(b)


def np_hsv_to_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized :func:`hsv_to_rgb`.

    Args:
        h, s, v: array-like or scalar, broadcast together

    Returns:
        rgb: array of shape (..., 3) on the scale of ``v``
    """
    h = element_to_array(h).astype(float)
    s = element_to_array(s).astype(float)
    v = element_to_array(v).astype(float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    hh = np.where(h >= HUE_360, 0.0, h) / 60.0
    i = np.floor(hh)
    ff = hh - i
    p = v * (1.0 - s)
    q = v * (1.0 - (s * ff))
    t = v * (1.0 - (s * (1.0 - ff)))

    sectors = [i == 0, i == 1, i == 2, i == 3, i == 4]
    r = np.select(sectors, [v, q, p, p, t], default=v)
    g = np.select(sectors, [t, v, v, q, p], default=p)
    b = np.select(sectors, [p, p, t, v, v], default=q)

    # Achromatic pixels are grey at value v
    grey = s <= 0.0
    r = np.where(grey, v, r)
    g = np.where(grey, v, g)
    b = np.where(grey, v, b)

    return np.stack([r, g, b], axis=-1)
