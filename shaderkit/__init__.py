"""shaderkit: color, CSS gradient and shader-identity utilities for real-time graphics tools."""

from .colors.rgb import (
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
)
from .colors.hsv import (
    ColorHSVINT,
    ColorHSVAINT,
    UnitHSV,
    UnitHSVA,
)
from .colors.color_base import ColorBase
from .colors.color import color_convert

# Friendly aliases for common integer variants
ColorRGB = ColorRGBINT
ColorRGBA = ColorRGBAINT
ColorHSV = ColorHSVINT

from .conversions import (
    unit_rgb_to_hsv,
    hsv_to_unit_rgb,
    np_unit_rgb_to_hsv,
    np_hsv_to_unit_rgb,
    convert,
)
from .css import (
    ColorStop,
    GradientSpec,
    GradientParseError,
    ParseFailure,
    ParseOutcome,
    ParseSuccess,
    normalize_channel,
    parse_css_gradient,
    parse_css_gradient_strict,
    try_parse_css_gradient,
)
from .gradients import (
    FourPointGradient,
    autofill_four_point_gradient,
    color_shift_hsv,
)
from .shaders import (
    STANDARD_SHADER_NAME,
    ShaderCache,
    is_standard_shader,
    is_using_standard_shader,
    set_shader_finder,
)
from .types.format_type import FormatType

__version__ = "0.1.0"

__all__ = [
    # Color classes
    "ColorRGBINT", "ColorRGBAINT",
    "ColorUnitRGB", "ColorUnitRGBA",
    "ColorHSVINT", "ColorHSVAINT",
    "UnitHSV", "UnitHSVA",
    "ColorRGB", "ColorRGBA", "ColorHSV",
    "ColorBase", "color_convert",

    # Conversions
    "unit_rgb_to_hsv", "hsv_to_unit_rgb",
    "np_unit_rgb_to_hsv", "np_hsv_to_unit_rgb",
    "convert", "FormatType",

    # CSS gradients
    "ColorStop", "GradientSpec",
    "GradientParseError",
    "ParseFailure", "ParseOutcome", "ParseSuccess",
    "normalize_channel",
    "parse_css_gradient", "parse_css_gradient_strict", "try_parse_css_gradient",

    # Four-point gradients
    "FourPointGradient", "autofill_four_point_gradient", "color_shift_hsv",

    # Shaders
    "STANDARD_SHADER_NAME", "ShaderCache",
    "is_standard_shader", "is_using_standard_shader", "set_shader_finder",

    # Version
    "__version__",
]
