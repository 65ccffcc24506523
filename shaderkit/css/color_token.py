"""
Decoding of single gradient parameters.

A parameter is one of:

- an angle, ``90deg``
- a functional color, ``rgba(r, g, b, a) stop%`` spread over four
  comma-separated tokens
- a color literal, ``#RRGGBB`` / ``#RGB`` / ``#RRGGBBAA`` / ``#RGBA`` or a CSS
  color name, optionally followed by ``stop%``

Bad numbers, unknown colors and bad stops are soft failures: they are
logged and replaced by a default, never raised.
"""
import logging
from typing import Optional, Sequence

import webcolors

from ..colors.rgb import ColorRGBAINT, ColorUnitRGBA
from ..types.format_type import FormatType, max_non_hue
from .channels import parse_channel, parse_float
from .constants import (
    ANGLE_UNIT,
    PERCENT_SCALE,
    PERCENT_SIGN,
    RGBA_ALPHA_STOP_SEPARATOR,
    RGBA_PREFIX,
    RGBA_TOKEN_COUNT,
    UNSPECIFIED_POSITION,
)
from .errors import MalformedTokenError
from .stops import RawColorEntry

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def is_angle_token(token: str) -> bool:
    return ANGLE_UNIT in token


def is_rgba_token(token: str) -> bool:
    return RGBA_PREFIX in token


def parse_angle(token: str, current: float) -> float:
    """Return the angle written in ``token``, or ``current`` if it is not a number."""
    angle = parse_float(token.replace(ANGLE_UNIT, ""))
    if angle is None:
        logger.debug("Unparseable angle %r, keeping %s", token, current)
        return current
    return angle


def parse_stop(text: Optional[str]) -> Optional[float]:
    """``"19.05%"`` -> ``0.1905``. Returns None when absent or not a number."""
    if text is None:
        return UNSPECIFIED_POSITION
    value = parse_float(text.replace(PERCENT_SIGN, ""))
    if value is None:
        logger.debug("Unparseable stop %r, position will be generated", text)
        return UNSPECIFIED_POSITION
    return value / PERCENT_SCALE


def _hex_to_rgba_int(literal: str) -> ColorRGBAINT:
    digits = literal[1:]
    if not digits or not set(digits) <= _HEX_DIGITS:
        raise ValueError(f"{literal!r} is not a hex color")

    alpha = max_non_hue[FormatType.INT]
    if len(digits) == 4:
        digits, alpha = digits[:3], int(digits[3] * 2, 16)
    elif len(digits) == 8:
        digits, alpha = digits[:6], int(digits[6:], 16)

    red, green, blue = webcolors.hex_to_rgb(f"#{digits}")
    return ColorRGBAINT((red, green, blue, alpha))


def parse_color_literal(literal: str) -> Optional[ColorUnitRGBA]:
    """
    Decode a hex code or CSS color name.

    Args:
        literal: ``#RGB``, ``#RGBA``, ``#RRGGBB``, ``#RRGGBBAA`` or a name
            such as ``red`` (case-insensitive)

    Returns:
        The color with channels in [0, 1], or None if ``literal`` is not a color
    """
    try:
        if literal.startswith("#"):
            color = _hex_to_rgba_int(literal)
        else:
            red, green, blue = webcolors.name_to_rgb(literal)
            color = ColorRGBAINT((red, green, blue, max_non_hue[FormatType.INT]))
    except ValueError:
        logger.debug("Unknown color literal %r, skipping", literal)
        return None
    return ColorUnitRGBA(color)


def parse_rgba_tokens(tokens: Sequence[str]) -> RawColorEntry:
    """
    Decode the four tokens of ``rgba(r, g, b, a) stop%``.

    The first token carries ``rgba(`` and the red channel; the fourth carries
    the alpha and, after ``") "``, an optional stop.
    """
    if len(tokens) != RGBA_TOKEN_COUNT:
        raise MalformedTokenError(f"rgba() needs {RGBA_TOKEN_COUNT} tokens, got {len(tokens)}: {list(tokens)!r}")
    red_token, green_token, blue_token, alpha_token = tokens

    red = parse_channel(red_token.replace(RGBA_PREFIX, ""), 0.0, "red")
    green = parse_channel(green_token, 0.0, "green")
    blue = parse_channel(blue_token, 0.0, "blue")

    alpha_and_stop = [piece for piece in alpha_token.split(RGBA_ALPHA_STOP_SEPARATOR) if piece]
    if not alpha_and_stop:
        raise MalformedTokenError(f"Empty alpha in rgba() token {alpha_token!r}")
    alpha = parse_channel(alpha_and_stop[0], 1.0, "alpha")
    stop = parse_stop(alpha_and_stop[1]) if len(alpha_and_stop) > 1 else UNSPECIFIED_POSITION

    return RawColorEntry(ColorUnitRGBA((red, green, blue, alpha)), stop)


def parse_literal_token(token: str) -> Optional[RawColorEntry]:
    """
    Decode ``<color>[ <stop>%]``.

    Returns:
        The entry, or None when the color part is not a known color

    Raises:
        MalformedTokenError: if the token is blank
    """
    pieces = token.split()
    if not pieces:
        raise MalformedTokenError(f"Empty color token {token!r}")

    color = parse_color_literal(pieces[0])
    if color is None:
        return None
    stop = parse_stop(pieces[1]) if len(pieces) > 1 else UNSPECIFIED_POSITION
    return RawColorEntry(color, stop)
