from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..colors.rgb import ColorUnitRGBA
from .constants import MIN_STOP_COUNT, FINAL_STOP_POSITION, UNSPECIFIED_POSITION
from .errors import InsufficientStopsError
from .gradient_spec import ColorStop


@dataclass(frozen=True)
class RawColorEntry:
    """A decoded color and the stop position as written (None when absent)."""
    color: ColorUnitRGBA
    raw_position: Optional[float] = UNSPECIFIED_POSITION

    @property
    def is_unspecified(self) -> bool:
        # negative positions mean the same as the sentinel
        return self.raw_position is UNSPECIFIED_POSITION or self.raw_position < 0


def fill_positions(entries: Sequence[RawColorEntry]) -> List[float]:
    """
    Resolve the raw positions of ``entries``.

    Unspecified positions become ``index / (count - 1)`` where ``index`` is the
    entry's index in the whole list. The last position is then forced to 1.0
    whatever it was. Explicit positions keep their written order and value.

    Raises:
        InsufficientStopsError: if there are fewer than two entries
    """
    count = len(entries)
    if count < MIN_STOP_COUNT:
        raise InsufficientStopsError(count)

    positions = [
        index / (count - 1) if entry.is_unspecified else float(entry.raw_position)  # type: ignore[arg-type]
        for index, entry in enumerate(entries)
    ]
    positions[-1] = FINAL_STOP_POSITION
    return positions


def normalize_stops(entries: Sequence[RawColorEntry]) -> Tuple[ColorStop, ...]:
    positions = fill_positions(entries)
    return tuple(
        ColorStop(color=entry.color, position=position)
        for entry, position in zip(entries, positions)
    )
