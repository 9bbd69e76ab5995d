"""Decoders for compound option values.

Each decoder takes the raw value string and returns the typed value, or raises
:class:`OptionValueError` carrying the diagnostic message for that option.
"""

import math
import re

from demand_scene.errors import BAD_BACKGROUND, BAD_DEBUG_PIXEL, BAD_DIMENSIONS, BAD_WARMUP, OptionValueError

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str, message: str) -> int:
    if not _INT_PATTERN.fullmatch(text):
        raise OptionValueError(message)
    try:
        return int(text)
    except ValueError:
        # Longer than the interpreter's integer digit limit.
        raise OptionValueError(message) from None


def _parse_float(text: str, message: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise OptionValueError(message) from None
    if not math.isfinite(value):
        raise OptionValueError(message)
    return value


def _split(text: str, separator: str, count: int, message: str) -> list[str]:
    parts = text.split(separator)
    if len(parts) != count:
        raise OptionValueError(message)
    return parts


def decode_dimensions(text: str) -> tuple[int, int]:
    """Decode ``WxH`` into positive ``(width, height)``."""
    width, height = (_parse_int(part, BAD_DIMENSIONS) for part in _split(text, "x", 2, BAD_DIMENSIONS))
    if width <= 0 or height <= 0:
        raise OptionValueError(BAD_DIMENSIONS)
    return width, height


def decode_background(text: str) -> tuple[float, float, float]:
    """Decode ``r/g/b`` into a non-negative color triple."""
    red, green, blue = (_parse_float(part, BAD_BACKGROUND) for part in _split(text, "/", 3, BAD_BACKGROUND))
    if red < 0 or green < 0 or blue < 0:
        raise OptionValueError(BAD_BACKGROUND)
    return red, green, blue


def decode_debug_pixel(text: str) -> tuple[int, int]:
    """Decode ``x/y`` into non-negative pixel coordinates.

    Bounds against the image size are checked separately, once the final
    dimensions are known.
    """
    x, y = (_parse_int(part, BAD_DEBUG_PIXEL) for part in _split(text, "/", 2, BAD_DEBUG_PIXEL))
    if x < 0 or y < 0:
        raise OptionValueError(BAD_DEBUG_PIXEL)
    return x, y


def decode_warmup(text: str) -> int:
    """Decode a non-negative warmup frame count."""
    frames = _parse_int(text, BAD_WARMUP)
    if frames < 0:
        raise OptionValueError(BAD_WARMUP)
    return frames
