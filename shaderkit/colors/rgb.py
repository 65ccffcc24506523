from typing import ClassVar, Tuple
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, WithAlpha, build_registry


class ColorRGBINT(ColorBase):
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "rgb"
    maxima: ClassVar[Tuple[int, int, int]] = (255, 255, 255)
    null_value: ClassVar[Tuple[int, int, int]] = (0, 0, 0)
    format_type: ClassVar[FormatType] = FormatType.INT


class ColorRGBAINT(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "rgba"
    maxima: ClassVar[Tuple[int, int, int, int]] = (255, 255, 255, 255)
    null_value: ClassVar[Tuple[int, int, int, int]] = (0, 0, 0, 0)
    format_type: ClassVar[FormatType] = FormatType.INT


class ColorUnitRGB(ColorBase):
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "rgb"
    maxima: ClassVar[Tuple[float, float, float]] = (1.0, 1.0, 1.0)
    null_value: ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT


class ColorUnitRGBA(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "rgba"
    maxima: ClassVar[Tuple[float, float, float, float]] = (1.0, 1.0, 1.0, 1.0)
    null_value: ClassVar[Tuple[float, float, float, float]] = (0.0, 0.0, 0.0, 0.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT


RGB = ColorRGBINT
RGBA = ColorRGBAINT


rgb_tuple_to_class = build_registry(
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
)
