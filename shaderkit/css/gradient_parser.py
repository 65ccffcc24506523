"""
CSS ``linear-gradient(...)`` parser.

Only the linear form is understood, and only a subset of it: an optional
``<angle>deg`` and any number of hex, named or ``rgba()`` colors, each
optionally followed by a ``<stop>%``. For example::

    background: linear-gradient(90deg, #0380FD 0%, #406FC8 19.05%, #2B398F 49.48%, #FF77C1 100%);

Three entry points share the same pipeline:

- :func:`parse_css_gradient` returns a :data:`ParseOutcome` and never raises
- :func:`parse_css_gradient_strict` returns a :class:`GradientSpec` or raises
  a :class:`GradientParseError`
- :func:`try_parse_css_gradient` returns ``(ok, colors, stops, angle)``
"""
import logging
from typing import List, Optional, Tuple

from ..types.color_types import RGBATuple
from .color_token import (
    is_angle_token,
    is_rgba_token,
    parse_angle,
    parse_literal_token,
    parse_rgba_tokens,
)
from .constants import DEFAULT_ANGLE_DEGREES, RGBA_TOKEN_COUNT
from .errors import GradientParseError, UnexpectedGradientError
from .gradient_spec import GradientSpec
from .outcome import ParseFailure, ParseOutcome, ParseSuccess
from .stops import RawColorEntry, normalize_stops
from .tokenizer import TokenStream, tokenize

logger = logging.getLogger(__name__)


def read_parameters(stream: TokenStream) -> Tuple[List[RawColorEntry], float]:
    """
    Walk every parameter token, collecting color entries and the angle.

    Returns:
        The raw color entries in source order and the last angle seen
        (``DEFAULT_ANGLE_DEGREES`` if there was none)
    """
    angle = DEFAULT_ANGLE_DEGREES
    entries: List[RawColorEntry] = []

    while not stream.exhausted:
        token = stream.consume()
        if is_angle_token(token):
            angle = parse_angle(token, angle)
        elif is_rgba_token(token):
            continuation = stream.consume_many(RGBA_TOKEN_COUNT - 1)
            entries.append(parse_rgba_tokens((token,) + continuation))
        else:
            entry = parse_literal_token(token)
            if entry is not None:
                entries.append(entry)

    return entries, angle


def parse_css_gradient_strict(css_gradient: str) -> GradientSpec:
    """
    Parse a CSS linear gradient.

    Raises:
        GradientParseError: if the markers are missing, a token is malformed
            or fewer than two colors were found
        TypeError: if ``css_gradient`` is not a string
    """
    if not isinstance(css_gradient, str):
        raise TypeError(f"Expected a CSS gradient string, got {type(css_gradient).__name__}")

    entries, angle = read_parameters(tokenize(css_gradient))
    return GradientSpec(stops=normalize_stops(entries), angle_degrees=angle)


def parse_css_gradient(css_gradient: str) -> ParseOutcome:
    """Parse a CSS linear gradient; every failure becomes a :class:`ParseFailure`."""
    try:
        spec = parse_css_gradient_strict(css_gradient)
    except GradientParseError as exc:
        logger.debug("Failed to parse gradient %r: %s", css_gradient, exc)
        return ParseFailure(exc)
    except (ValueError, TypeError, IndexError, AttributeError) as exc:
        logger.debug("Unexpected error parsing gradient %r", css_gradient, exc_info=True)
        error = UnexpectedGradientError(f"{type(exc).__name__}: {exc}")
        error.__cause__ = exc
        return ParseFailure(error)
    return ParseSuccess(spec)


def try_parse_css_gradient(
    css_gradient: str,
) -> Tuple[bool, Optional[List[RGBATuple]], Optional[List[float]], float]:
    """
    Boolean form of :func:`parse_css_gradient`.

    Returns:
        ``(True, colors, stops, angle)`` on success, otherwise
        ``(False, None, None, DEFAULT_ANGLE_DEGREES)``
    """
    outcome = parse_css_gradient(css_gradient)
    if not outcome:
        return False, None, None, DEFAULT_ANGLE_DEGREES
    spec = outcome.unwrap()
    return True, list(spec.colors), list(spec.positions), spec.angle_degrees
