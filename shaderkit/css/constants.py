# No dependencies
"""Markers, separators and defaults used by the CSS gradient parser."""

DEFAULT_ANGLE_DEGREES = 180.0

LINEAR_GRADIENT_PREFIX = "linear-gradient("
LINEAR_GRADIENT_POSTFIX = ");"

PARAMETER_SEPARATOR = ","
RGBA_PREFIX = "rgba("
RGBA_ALPHA_STOP_SEPARATOR = ") "
# rgba(r, g, b, a) spans this many comma-separated parameters
RGBA_TOKEN_COUNT = 4

ANGLE_UNIT = "deg"
PERCENT_SIGN = "%"
PERCENT_SCALE = 100.0

# Sentinel for "no explicit stop percentage was given"
UNSPECIFIED_POSITION = None

MIN_STOP_COUNT = 2
FINAL_STOP_POSITION = 1.0
