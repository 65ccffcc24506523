import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Analytical HSV from sRGB (0..1).

    Returns:
        h ∈ [0, 360), s ∈ [0, 1], v ∈ [0, 1]
    """
    v = max(r, g, b)
    m = min(r, g, b)
    delta = v - m

    if delta == 0:
        h = 0.0
    elif v == r:
        h = 60.0 * (((g - b) / delta) % 6)
    elif v == g:
        h = 60.0 * (((b - r) / delta) + 2)
    else:
        h = 60.0 * (((r - g) / delta) + 4)

    s = 0.0 if v == 0 else delta / v
    return h % 360.0, s, v


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized analytical HSV from sRGB (0..1).

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    v = np.maximum.reduce([r, g, b])
    m = np.minimum.reduce([r, g, b])
    delta = v - m
    safe_delta = np.where(delta == 0, 1.0, delta)

    h = np.where(
        v == r,
        ((g - b) / safe_delta) % 6,
        np.where(
            v == g,
            ((b - r) / safe_delta) + 2,
            ((r - g) / safe_delta) + 4,
        ),
    )
    h = np.where(delta == 0, 0.0, h * 60.0) % 360.0

    mask = v > 0
    s = np.where(mask, delta / np.where(mask, v, 1.0), 0.0)

    return np.stack([h, s, v], axis=-1)
