from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterator, Sequence, Tuple, Union

import numpy as np
from boundednumbers import clamp
from boundednumbers.functions import cyclic_wrap_float

from ..colors.hsv import UnitHSVA
from ..colors.rgb import ColorUnitRGBA
from ..conversions import np_hsv_to_unit_rgb, np_unit_rgb_to_hsv
from ..types.format_type import HUE_360
from ..types.color_types import RGBATuple

ColorInput = Union[ColorUnitRGBA, RGBATuple]

# (hue, saturation, value) offsets; hue is a fraction of a full turn
AUTOFILL_OFFSETS: Dict[str, Tuple[float, float, float]] = {
    "top_left": (0.0, 0.0, 0.0),
    "top_right": (0.02, -0.2, -0.1),
    "bottom_left": (-0.03, 0.1, 0.3),
    "bottom_right": (0.01, -0.1, 0.2),
    "stroke": (0.01, -0.2, 0.0),
}


def color_shift_hsv(
    source: ColorInput,
    hue_offset: float,
    saturation_offset: float,
    value_offset: float,
) -> ColorUnitRGBA:
    """
    Shift a color in HSV space.

    Args:
        source: RGBA color with channels in [0, 1]
        hue_offset: Added to the hue expressed as a fraction of a turn; wraps
        saturation_offset: Added to saturation, result clamped to [0, 1]
        value_offset: Added to value, result clamped to [0, 1]

    Returns:
        The shifted color, with the source alpha
    """
    h, s, v, a = ColorUnitRGBA(source).convert("hsva").value
    hue = cyclic_wrap_float(h / HUE_360 + hue_offset, 0.0, 1.0)
    saturation = clamp(s + saturation_offset, 0.0, 1.0)
    value = clamp(v + value_offset, 0.0, 1.0)
    shifted = UnitHSVA((float(hue) * HUE_360, float(saturation), float(value), a))
    return shifted.convert("rgba")  # type: ignore[return-value]


def np_color_shift_hsv(colors: np.ndarray, offsets: np.ndarray) -> np.ndarray:
    """
    Vectorized :func:`color_shift_hsv`.

    Args:
        colors: ``(..., 4)`` RGBA in [0, 1]
        offsets: ``(..., 3)`` hue/saturation/value offsets, broadcast against ``colors``

    Returns:
        ``(..., 4)`` shifted RGBA, alpha untouched
    """
    colors = np.asarray(colors, dtype=float)
    offsets = np.asarray(offsets, dtype=float)
    if colors.shape[-1] != 4:
        raise ValueError(f"Expected RGBA colors with last dimension 4, got shape {colors.shape}")
    if offsets.shape[-1] != 3:
        raise ValueError(f"Expected HSV offsets with last dimension 3, got shape {offsets.shape}")

    hsv = np_unit_rgb_to_hsv(colors[..., 0], colors[..., 1], colors[..., 2])
    hue = np.asarray(cyclic_wrap_float(hsv[..., 0] / HUE_360 + offsets[..., 0], 0.0, 1.0))
    saturation = np.asarray(clamp(hsv[..., 1] + offsets[..., 1], 0.0, 1.0))
    value = np.asarray(clamp(hsv[..., 2] + offsets[..., 2], 0.0, 1.0))

    rgb = np_hsv_to_unit_rgb(hue * HUE_360, saturation, value)
    alpha = np.broadcast_to(colors[..., 3], rgb.shape[:-1])
    return np.concatenate([rgb, alpha[..., np.newaxis]], axis=-1)


@dataclass(frozen=True)
class FourPointGradient:
    top_left: ColorUnitRGBA
    top_right: ColorUnitRGBA
    bottom_left: ColorUnitRGBA
    bottom_right: ColorUnitRGBA
    stroke: ColorUnitRGBA

    def __iter__(self) -> Iterator[ColorUnitRGBA]:
        return iter((self.top_left, self.top_right, self.bottom_left, self.bottom_right, self.stroke))

    def as_array(self) -> np.ndarray:
        """``(5, 4)`` float32 in field order."""
        return np.array([color.value for color in self], dtype=np.float32)


def autofill_four_point_gradient(source: ColorInput) -> FourPointGradient:
    """Derive the corner and stroke colors of a four-point gradient from one color."""
    source = ColorUnitRGBA(source)
    names: Sequence[str] = tuple(AUTOFILL_OFFSETS)
    shifted = np_color_shift_hsv(
        np.array(source.value, dtype=float),
        np.array([AUTOFILL_OFFSETS[name] for name in names], dtype=float),
    )
    colors = {name: ColorUnitRGBA(row) for name, row in zip(names, shifted)}
    # the top-left corner is the source itself, not a round trip through HSV
    colors["top_left"] = source
    return FourPointGradient(**colors)
