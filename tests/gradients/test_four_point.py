from shaderkit.gradients import (
    AUTOFILL_OFFSETS,
    FourPointGradient,
    autofill_four_point_gradient,
    color_shift_hsv,
    np_color_shift_hsv,
)
from shaderkit.colors.rgb import ColorUnitRGBA
import numpy as np
import pytest

RED = (1.0, 0.0, 0.0, 1.0)


def test_zero_shift_is_identity():
    color = (0.2, 0.4, 0.6, 0.5)
    shifted = color_shift_hsv(color, 0.0, 0.0, 0.0)
    assert isinstance(shifted, ColorUnitRGBA)
    assert shifted.value == pytest.approx(color)


def test_shift_keeps_alpha():
    assert color_shift_hsv((0.3, 0.6, 0.9, 0.25), 0.1, -0.3, 0.1).alpha == pytest.approx(0.25)


def test_hue_wraps():
    assert color_shift_hsv(RED, -0.25, 0.0, 0.0).value == pytest.approx((0.5, 0.0, 1.0, 1.0))
    assert color_shift_hsv(RED, 1.0, 0.0, 0.0).value == pytest.approx(RED)


def test_saturation_and_value_clamp():
    assert color_shift_hsv(RED, 0.0, -2.0, 0.0).value == pytest.approx((1.0, 1.0, 1.0, 1.0))
    assert color_shift_hsv(RED, 0.0, 0.0, -5.0).value == pytest.approx((0.0, 0.0, 0.0, 1.0))
    assert color_shift_hsv((0.2, 0.4, 0.6, 1.0), 0.0, 0.0, 1.0).value[2] == pytest.approx(1.0)


def test_vectorized_shift_matches_scalar():
    colors = np.array([[0.2, 0.4, 0.6, 0.5], [1.0, 0.0, 0.0, 1.0], [0.9, 0.9, 0.1, 0.3]])
    offsets = np.array([[0.02, -0.2, -0.1], [-0.03, 0.1, 0.3], [0.5, 0.0, -0.2]])
    shifted = np_color_shift_hsv(colors, offsets)
    assert shifted.shape == (3, 4)
    for color, offset, result in zip(colors, offsets, shifted):
        assert np.allclose(result, color_shift_hsv(tuple(color), *offset).value, atol=1e-6)


def test_vectorized_shift_rejects_bad_shapes():
    with pytest.raises(ValueError):
        np_color_shift_hsv(np.zeros((2, 3)), np.zeros((2, 3)))
    with pytest.raises(ValueError):
        np_color_shift_hsv(np.zeros((2, 4)), np.zeros((2, 2)))


def test_autofill_four_point_gradient():
    gradient = autofill_four_point_gradient(RED)
    assert isinstance(gradient, FourPointGradient)
    assert gradient.top_left == ColorUnitRGBA(RED)
    assert gradient.top_right.value == pytest.approx((0.9, 0.2664, 0.18, 1.0))
    assert gradient.bottom_left.value == pytest.approx((1.0, 0.0, 0.18, 1.0))
    for name in ("top_right", "bottom_left", "bottom_right", "stroke"):
        expected = color_shift_hsv(RED, *AUTOFILL_OFFSETS[name])
        assert getattr(gradient, name).value == pytest.approx(expected.value, abs=1e-6)


def test_autofill_as_array():
    gradient = autofill_four_point_gradient(ColorUnitRGBA((0.1, 0.5, 0.3, 0.75)))
    array = gradient.as_array()
    assert array.shape == (5, 4)
    assert np.allclose(array[:, 3], 0.75)
    assert len(list(gradient)) == 5
