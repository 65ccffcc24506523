"""
Channel decoding for functional colors.

``rgba()`` channels may be written on a 0-1 or a 0-255 scale. There is no
way to tell ``1`` on the 0-255 scale from ``1.0`` on the 0-1 scale, so any
value strictly greater than 1.0 is taken as 8-bit and everything else as
already normalized.
"""
import logging
from typing import Optional

from ..types.format_type import FormatType, max_non_hue

logger = logging.getLogger(__name__)


def channel_format(value: float) -> FormatType:
    """Return the format the 0-1 / 0-255 heuristic assigns to ``value``."""
    if value > max_non_hue[FormatType.FLOAT]:
        return FormatType.INT
    return FormatType.FLOAT


def normalize_channel(value: float) -> float:
    """Map a channel on either scale to [0, 1] (values above 1.0 are divided by 255)."""
    return value / max_non_hue[channel_format(value)]


def parse_float(text: str) -> Optional[float]:
    """Parse ``text`` as a float, returning None instead of raising."""
    try:
        return float(text)
    except (TypeError, ValueError):
        return None


def parse_channel(text: str, default: float, channel: str = "channel") -> float:
    """
    Parse and normalize one ``rgba()`` channel.

    Args:
        text: Raw channel text, surrounding whitespace allowed
        default: Value used when ``text`` is not a number
        channel: Channel name, only used in the log message

    Returns:
        The normalized channel, or ``default``
    """
    value = parse_float(text)
    if value is None:
        logger.debug("Unparseable %s %r, using %s", channel, text, default)
        return default
    return normalize_channel(value)
