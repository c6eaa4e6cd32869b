from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import Scalar


def rgb_to_hsv(r: Scalar, g: Scalar, b: Scalar) -> Tuple[float, float, float]:
    """
    RGB to HSV, inverse of :func:`hsv_to_rgb`.

    Output:
        h in [0, 360) (0 for greys)
        s in [0, 1]
        v on the scale of the input channels
    """
    mx = max(r, g, b)
    mn = min(r, g, b)
    delta = mx - mn

    if delta == 0:
        h = 0.0
    elif mx == r:
        h = 60.0 * (((g - b) / delta) % 6)
    elif mx == g:
        h = 60.0 * (((b - r) / delta) + 2)
    else:
        h = 60.0 * (((r - g) / delta) + 4)

    s = 0.0 if mx == 0 else delta / mx
    return float(h), float(s), float(mx)


def np_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized :func:`rgb_to_hsv`.

    Returns:
        hsv: array of shape (..., 3)
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    mx = np.maximum.reduce([r, g, b])
    mn = np.minimum.reduce([r, g, b])
    delta = mx - mn
    safe_delta = np.where(delta == 0, 1.0, delta)

    h = np.select(
        [delta == 0, mx == r, mx == g],
        [
            0.0,
            60.0 * (((g - b) / safe_delta) % 6),
            60.0 * (((b - r) / safe_delta) + 2),
        ],
        default=60.0 * (((r - g) / safe_delta) + 4),
    )

    s = np.zeros_like(mx)
    mask = mx > 0
    s[mask] = delta[mask] / mx[mask]

    return np.stack([h, s, mx], axis=-1)
