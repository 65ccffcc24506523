from shaderkit.css import (
    GradientSpec,
    GradientStructureError,
    InsufficientStopsError,
    MalformedTokenError,
    ParseFailure,
    ParseSuccess,
    UnexpectedGradientError,
    parse_css_gradient,
    parse_css_gradient_strict,
    try_parse_css_gradient,
)
from shaderkit.samples.colors import FIGMA_GRADIENT, RGBA_GRADIENT, samples_hex_rgba
import numpy as np
import pytest


def test_figma_gradient():
    outcome = parse_css_gradient(FIGMA_GRADIENT)
    assert isinstance(outcome, ParseSuccess)
    assert outcome
    spec = outcome.spec
    assert spec.angle_degrees == 90.0
    assert spec.positions == pytest.approx((0.0, 0.1905, 0.4948, 1.0))
    assert spec.positions[-1] == 1.0
    for color, literal in zip(spec.colors, ["#0380FD", "#406FC8", "#2B398F", "#FF77C1"]):
        expected = tuple(channel / 255 for channel in samples_hex_rgba[literal])
        assert color == pytest.approx(expected)


def test_rgba_gradient_defaults_angle():
    spec = parse_css_gradient_strict(RGBA_GRADIENT)
    assert spec.angle_degrees == 180.0
    assert len(spec) == 2
    assert spec.colors == ((1.0, 0.0, 0.0, 1.0), (0.0, 0.0, 1.0, 1.0))
    assert spec.positions == (0.0, 1.0)


def test_mixed_rgba_and_literals():
    spec = parse_css_gradient_strict(
        "linear-gradient(45deg, rgba(0.5, 0.5, 0.5, 0.5) 10%, red, #00F 80%);"
    )
    assert spec.angle_degrees == 45.0
    assert spec.colors[0] == pytest.approx((0.5, 0.5, 0.5, 0.5))
    assert spec.colors[1] == (1.0, 0.0, 0.0, 1.0)
    assert spec.positions == pytest.approx((0.1, 0.5, 1.0))


def test_unspecified_stops_are_evenly_spaced():
    spec = parse_css_gradient_strict("linear-gradient(red, lime, blue, white, black);")
    assert spec.positions == (0.0, 0.25, 0.5, 0.75, 1.0)


def test_last_stop_forced_to_one():
    spec = parse_css_gradient_strict("linear-gradient(red 0%, blue 60%);")
    assert spec.positions == (0.0, 1.0)


def test_out_of_order_stops_are_kept():
    spec = parse_css_gradient_strict("linear-gradient(red 80%, lime 20%, blue 50%);")
    assert spec.positions == pytest.approx((0.8, 0.2, 1.0))


def test_last_angle_wins_and_bad_angle_is_ignored():
    spec = parse_css_gradient_strict("linear-gradient(30deg, red, blue, xdeg);")
    assert spec.angle_degrees == 30.0


def test_unknown_colors_are_skipped():
    spec = parse_css_gradient_strict("linear-gradient(red, notacolor 50%, blue);")
    assert len(spec) == 2
    assert spec.positions == (0.0, 1.0)


@pytest.mark.parametrize("text", [
    "linear-gradient(90deg);",
    "linear-gradient(90deg, red);",
    "linear-gradient(notacolor, blue);",
])
def test_fewer_than_two_colors_fails(text):
    outcome = parse_css_gradient(text)
    assert isinstance(outcome, ParseFailure)
    assert not outcome
    assert isinstance(outcome.error, InsufficientStopsError)


@pytest.mark.parametrize("text", [
    "radial-gradient(red, blue);",
    "90deg, #0380FD 0%, #FF77C1 100%);",
    "linear-gradient(red, blue)",
    "",
])
def test_missing_markers_fail(text):
    outcome = parse_css_gradient(text)
    assert not outcome
    assert isinstance(outcome.error, GradientStructureError)


def test_truncated_rgba_fails_without_raising():
    outcome = parse_css_gradient("linear-gradient(red, rgba(255, 0);")
    assert not outcome
    assert isinstance(outcome.error, MalformedTokenError)


def test_trailing_comma_fails():
    outcome = parse_css_gradient("linear-gradient(red, blue,);")
    assert isinstance(outcome.error, MalformedTokenError)


def test_non_string_input_fails():
    outcome = parse_css_gradient(None)  # type: ignore[arg-type]
    assert not outcome
    assert isinstance(outcome.error, UnexpectedGradientError)
    assert isinstance(outcome.error.__cause__, TypeError)


def test_strict_raises():
    with pytest.raises(GradientStructureError):
        parse_css_gradient_strict("red, blue")
    with pytest.raises(InsufficientStopsError):
        parse_css_gradient_strict("linear-gradient(red);")


def test_unwrap():
    assert isinstance(parse_css_gradient(RGBA_GRADIENT).unwrap(), GradientSpec)
    with pytest.raises(GradientStructureError):
        parse_css_gradient("nope").unwrap()


def test_try_parse_success():
    ok, colors, stops, angle = try_parse_css_gradient(FIGMA_GRADIENT)
    assert ok
    assert len(colors) == len(stops) == 4
    assert stops[-1] == 1.0
    assert angle == 90.0


def test_try_parse_failure():
    assert try_parse_css_gradient("linear-gradient(red);") == (False, None, None, 180.0)
    assert try_parse_css_gradient("garbage") == (False, None, None, 180.0)


def test_array_views():
    spec = parse_css_gradient_strict(FIGMA_GRADIENT)
    colors = spec.colors_array()
    positions = spec.positions_array()
    assert colors.shape == (4, 4)
    assert colors.dtype == np.float32
    assert positions.shape == (4,)
    assert np.allclose(positions, [0.0, 0.1905, 0.4948, 1.0])


def test_spec_is_immutable():
    spec = parse_css_gradient_strict(RGBA_GRADIENT)
    with pytest.raises(AttributeError):
        spec.angle_degrees = 0.0  # type: ignore[misc]
