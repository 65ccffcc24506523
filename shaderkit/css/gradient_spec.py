from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

import numpy as np

from ..colors.rgb import ColorUnitRGBA
from ..types.color_types import RGBATuple
from .constants import DEFAULT_ANGLE_DEGREES


@dataclass(frozen=True)
class ColorStop:
    """A color anchored at ``position`` along the 0-1 gradient axis."""
    color: ColorUnitRGBA
    position: float

    def __post_init__(self) -> None:
        if not isinstance(self.color, ColorUnitRGBA):
            object.__setattr__(self, 'color', ColorUnitRGBA(self.color))
        object.__setattr__(self, 'position', float(self.position))


@dataclass(frozen=True)
class GradientSpec:
    """
    Parsed linear gradient: an angle in degrees and its color stops in the
    order they were written.

    ``colors_array`` / ``positions_array`` give the parallel array form
    (``(N, 4)`` and ``(N,)`` float32) that renderers consume.
    """
    stops: Tuple[ColorStop, ...]
    angle_degrees: float = DEFAULT_ANGLE_DEGREES
    _colors: Tuple[RGBATuple, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        stops = tuple(self.stops)
        for stop in stops:
            if not isinstance(stop, ColorStop):
                raise TypeError(f"GradientSpec expects ColorStop items, got {type(stop).__name__}")
        object.__setattr__(self, 'stops', stops)
        object.__setattr__(self, 'angle_degrees', float(self.angle_degrees))
        object.__setattr__(self, '_colors', tuple(stop.color.value for stop in stops))

    @property
    def colors(self) -> Tuple[RGBATuple, ...]:
        return self._colors

    @property
    def positions(self) -> Tuple[float, ...]:
        return tuple(stop.position for stop in self.stops)

    def colors_array(self) -> np.ndarray:
        return np.array(self._colors, dtype=np.float32).reshape(-1, 4)

    def positions_array(self) -> np.ndarray:
        return np.array(self.positions, dtype=np.float32)

    def __len__(self) -> int:
        return len(self.stops)
