"""Basic shaderkit usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from shaderkit import (
    ColorRGBA,
    FormatType,
    autofill_four_point_gradient,
    parse_css_gradient,
    try_parse_css_gradient,
)
from shaderkit.samples.colors import FIGMA_GRADIENT, RGBA_GRADIENT


def demonstrate_gradients() -> None:
    # Parse a gradient copied from a design tool.
    outcome = parse_css_gradient(FIGMA_GRADIENT)
    if outcome:
        spec = outcome.spec
        print("Angle:", spec.angle_degrees)
        for stop in spec.stops:
            print(f"  {stop.position:.4f}  {stop.color.value}")
        print("Colors array:\n", spec.colors_array())
    else:
        print("Failed:", outcome.reason)

    # Boolean form, with no angle token the angle defaults to 180.
    ok, colors, stops, angle = try_parse_css_gradient(RGBA_GRADIENT)
    print("rgba() gradient:", ok, colors, stops, angle)

    # Missing markers never raise.
    print("Malformed:", parse_css_gradient("radial-gradient(red, blue);"))


def demonstrate_four_point() -> None:
    accent = ColorRGBA((3, 128, 253, 255)).convert("rgba", FormatType.FLOAT)
    gradient = autofill_four_point_gradient(accent)
    for name in ("top_left", "top_right", "bottom_left", "bottom_right", "stroke"):
        print(f"{name:>12}: {getattr(gradient, name).value}")


if __name__ == "__main__":
    demonstrate_gradients()
    demonstrate_four_point()
