from shaderkit.css.stops import RawColorEntry, fill_positions, normalize_stops
from shaderkit.css.errors import InsufficientStopsError
from shaderkit.css.gradient_spec import ColorStop
from shaderkit.colors.rgb import ColorUnitRGBA
import pytest

RED = ColorUnitRGBA((1.0, 0.0, 0.0, 1.0))
BLUE = ColorUnitRGBA((0.0, 0.0, 1.0, 1.0))


def entries(*positions):
    return [RawColorEntry(RED, position) for position in positions]


def test_needs_two_entries():
    for count in (0, 1):
        with pytest.raises(InsufficientStopsError) as info:
            fill_positions(entries(*([None] * count)))
        assert info.value.count == count


def test_all_unspecified_are_evenly_spaced():
    for count in range(2, 7):
        positions = fill_positions(entries(*([None] * count)))
        assert positions[:-1] == [i / (count - 1) for i in range(count - 1)]
        assert positions[-1] == 1.0


def test_unspecified_use_index_in_full_list():
    assert fill_positions(entries(0.0, None, 0.9, None)) == pytest.approx([0.0, 1 / 3, 0.9, 1.0])


def test_last_position_is_forced_to_one():
    assert fill_positions(entries(0.0, 0.5, 0.8))[-1] == 1.0
    assert fill_positions(entries(0.2, 1.5))[-1] == 1.0


def test_explicit_order_is_preserved():
    assert fill_positions(entries(0.7, 0.2, 0.4)) == [0.7, 0.2, 1.0]


def test_negative_position_counts_as_unspecified():
    assert fill_positions(entries(-0.1, None, None)) == [0.0, 0.5, 1.0]


def test_normalize_stops_builds_color_stops():
    stops = normalize_stops([RawColorEntry(RED, 0.25), RawColorEntry(BLUE)])
    assert stops == (ColorStop(RED, 0.25), ColorStop(BLUE, 1.0))
    assert all(isinstance(stop, ColorStop) for stop in stops)
