"""
CSS gradient parsing
====================

>>> from shaderkit.css import parse_css_gradient
>>> outcome = parse_css_gradient("linear-gradient(90deg, #0380FD 0%, #FF77C1 100%);")
>>> spec = outcome.unwrap()
>>> spec.angle_degrees, spec.positions
(90.0, (0.0, 1.0))
"""

from .channels import channel_format, normalize_channel
from .color_token import parse_color_literal
from .errors import (
    GradientParseError,
    GradientStructureError,
    InsufficientStopsError,
    MalformedTokenError,
    UnexpectedGradientError,
)
from .gradient_parser import parse_css_gradient, parse_css_gradient_strict, try_parse_css_gradient
from .gradient_spec import ColorStop, GradientSpec
from .outcome import ParseFailure, ParseOutcome, ParseSuccess
from .stops import RawColorEntry, normalize_stops
from .tokenizer import TokenStream, tokenize

__all__ = [
    'channel_format',
    'normalize_channel',
    'parse_color_literal',
    'GradientParseError',
    'GradientStructureError',
    'InsufficientStopsError',
    'MalformedTokenError',
    'UnexpectedGradientError',
    'parse_css_gradient',
    'parse_css_gradient_strict',
    'try_parse_css_gradient',
    'ColorStop',
    'GradientSpec',
    'ParseFailure',
    'ParseOutcome',
    'ParseSuccess',
    'RawColorEntry',
    'normalize_stops',
    'TokenStream',
    'tokenize',
]
