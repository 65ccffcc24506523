"""
shaderkit color classes
=======================

Immutable scalar color classes for the RGB and HSV color spaces.

Features
--------
- Immutable color instances (frozen after initialization)
- Value clamping to valid ranges
- Type conversion between color spaces and formats
- Alpha channel support with the WithAlpha mixin

Usage
-----
>>> from shaderkit.colors.rgb import ColorRGBAINT, ColorUnitRGBA
>>> color = ColorRGBAINT((255, 128, 0, 255))
>>> unit = color.convert("rgba", FormatType.FLOAT)
>>> unit.value  # (1.0, 0.50196..., 0.0, 1.0)
>>> unit.with_alpha(0.5).alpha  # 0.5

Color Classes
-------------
RGB variants:
    - ColorRGBINT: Integer RGB (0-255)
    - ColorRGBAINT: Integer RGBA with alpha
    - ColorUnitRGB: Float RGB (0.0-1.0)
    - ColorUnitRGBA: Float RGBA with alpha

HSV variants (hue in degrees):
    - ColorHSVINT: Integer HSV
    - ColorHSVAINT: Integer HSVA with alpha
    - UnitHSV: Float HSV
    - UnitHSVA: Float HSVA with alpha
"""

from .color import color_convert, get_color_class, unified_tuple_to_class
from .color_base import ColorBase, WithAlpha
from .rgb import ColorRGBINT, ColorRGBAINT, ColorUnitRGB, ColorUnitRGBA
from .hsv import ColorHSVINT, ColorHSVAINT, UnitHSV, UnitHSVA
from ..types.format_type import FormatType


__all__ = [
    'color_convert',
    'get_color_class',
    'unified_tuple_to_class',
    'ColorBase',
    'WithAlpha',
    'ColorRGBINT',
    'ColorRGBAINT',
    'ColorUnitRGB',
    'ColorUnitRGBA',
    'ColorHSVINT',
    'ColorHSVAINT',
    'UnitHSV',
    'UnitHSVA',
    'FormatType',
]
