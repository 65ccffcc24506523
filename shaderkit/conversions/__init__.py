"""
shaderkit color space conversions
=================================

Scalar and vectorized (numpy) RGB ↔ HSV conversions plus a scalar
``convert`` wrapper that also handles alpha and the INT (0-255) / FLOAT
(0.0-1.0) value formats.

Hue is expressed in degrees, [0, 360). Saturation, value and RGB channels
are expressed in [0, 1].

Examples
--------
>>> from shaderkit.conversions import unit_rgb_to_hsv, hsv_to_unit_rgb
>>> h, s, v = unit_rgb_to_hsv(1.0, 0.5, 0.0)
>>> r, g, b = hsv_to_unit_rgb(h, s, v)
"""

from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv
from .to_rgb import hsv_to_unit_rgb, np_hsv_to_unit_rgb
from .wrapper import convert

from ..types.format_type import FormatType

__all__ = [
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',
    'hsv_to_unit_rgb',
    'np_hsv_to_unit_rgb',
    'convert',
    'FormatType',
]
