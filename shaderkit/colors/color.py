from __future__ import annotations
from .color_base import ColorBase
from .rgb import rgb_tuple_to_class
from .hsv import hsv_tuple_to_class
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from ..conversions import convert

unified_tuple_to_class: dict[tuple[ColorSpace, FormatType], type[ColorBase]] = {**rgb_tuple_to_class, **hsv_tuple_to_class}


def color_convert(self: ColorBase, to_space: ColorSpace | None = None, to_format: FormatType | None = None) -> ColorBase:
    """
    Convert this color to a different color space and/or format.

    Args:
        to_space: Target color space (e.g., "rgb", "rgba", "hsv", "hsva")
        to_format: Target format type (INT, FLOAT). Defaults to current format.

    Returns:
        New ColorBase instance in the target space/format
    """
    to_space = to_space or self.mode
    to_space = to_space.lower()  # type: ignore
    to_format = FormatType(to_format or self.format_type)

    result = convert(
        color=self.value,
        from_space=self.mode,
        to_space=to_space,
        input_type=self.format_type,
        output_type=to_format,
    )
    return get_color_class(to_space, to_format)(result)


ColorBase.convert = color_convert


def get_color_class(color_space: str, format_type: FormatType) -> type[ColorBase]:
    color_class = unified_tuple_to_class.get((color_space, format_type))  # type: ignore[arg-type]
    if color_class is None:
        raise ValueError(
            f"Unsupported color space/format combination: {color_space}/{format_type}"
        )
    return color_class
