from typing import Callable, Dict, Tuple

from ..types.format_type import FormatType, max_non_hue
from ..types.color_types import ScalarVector, ColorSpace

from .to_rgb import hsv_to_unit_rgb
from .to_hsv import unit_rgb_to_hsv

CONVERT_SCALAR: Dict[Tuple[str, str], Callable[[float, float, float], Tuple[float, float, float]]] = {
    ("rgb", "hsv"): unit_rgb_to_hsv,
    ("hsv", "rgb"): hsv_to_unit_rgb,
}


def normalize(color: ScalarVector, space: str, fmt: FormatType) -> Tuple[float, float, float]:
    maxval = max_non_hue[fmt]

    if space == "rgb":
        return tuple(c / maxval for c in color)  # type: ignore[return-value]

    if space == "hsv":
        h, a, b = color
        return float(h), a / maxval, b / maxval

    raise ValueError(f"Unknown space: {space}")


def scale(color: Tuple[float, float, float], space: str, fmt: FormatType) -> ScalarVector:
    maxval = max_non_hue[fmt]

    if space == "rgb":
        scaled = tuple(c * maxval for c in color)
    elif space == "hsv":
        h, a, b = color
        scaled = (h, a * maxval, b * maxval)
    else:
        raise ValueError(f"Unknown space: {space}")

    if fmt == FormatType.INT:
        return tuple(int(round(c)) for c in scaled)
    return scaled


def convert(
    color: ScalarVector,
    from_space: ColorSpace,
    to_space: ColorSpace,
    input_type: FormatType = FormatType.FLOAT,
    output_type: FormatType = FormatType.FLOAT,
) -> ScalarVector:
    """
    Convert a scalar color tuple between spaces and formats.

    Alpha is carried through (rescaled to the output format); converting from
    a space without alpha to one with alpha adds a fully opaque channel.
    """
    input_type = FormatType(input_type)
    output_type = FormatType(output_type)
    has_alpha_in = from_space.endswith("a")
    has_alpha_out = to_space.endswith("a")

    if has_alpha_in:
        base, alpha = tuple(color[:3]), color[3]
    else:
        base, alpha = tuple(color), None

    fs, ts = from_space[:3], to_space[:3]

    # normalize → convert → scale
    base_norm = normalize(base, fs, input_type)
    if fs == ts:
        converted = base_norm
    else:
        try:
            converted = CONVERT_SCALAR[(fs, ts)](*base_norm)
        except KeyError:
            raise ValueError(f"Unsupported conversion: {from_space} -> {to_space}") from None

    out = scale(converted, ts, output_type)

    if not has_alpha_out:
        return out

    max_out = max_non_hue[output_type]
    if alpha is None:
        new_alpha = max_out
    else:
        new_alpha = alpha / max_non_hue[input_type] * max_out
        if output_type == FormatType.INT:
            new_alpha = int(round(new_alpha))
    return tuple(out) + (new_alpha,)
