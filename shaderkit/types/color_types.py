from __future__ import annotations
from typing import Literal, Tuple, Union

Scalar = Union[int, float]
ScalarVector = Tuple[Scalar, ...]
RGBATuple = Tuple[float, float, float, float]
ColorSpace = Literal["rgb", "rgba", "hsv", "hsva"]
HUE_SPACES = {"hsv", "hsva"}
