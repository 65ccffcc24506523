from .four_point import (
    AUTOFILL_OFFSETS,
    FourPointGradient,
    autofill_four_point_gradient,
    color_shift_hsv,
    np_color_shift_hsv,
)
from ..css.gradient_spec import ColorStop, GradientSpec

__all__ = [
    'AUTOFILL_OFFSETS',
    'FourPointGradient',
    'autofill_four_point_gradient',
    'color_shift_hsv',
    'np_color_shift_hsv',
    'ColorStop',
    'GradientSpec',
]
