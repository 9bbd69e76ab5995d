"""Command-line parsing for the scene renderer."""

from .decoders import decode_background, decode_debug_pixel, decode_dimensions, decode_warmup
from .dispatcher import BOOLEAN_FLAGS, SHORT_ALIASES, VALUE_FLAGS, OptionParser, parse_options
from .validator import check_debug_pixel, check_scene_file

__all__ = [
    "BOOLEAN_FLAGS",
    "SHORT_ALIASES",
    "VALUE_FLAGS",
    "OptionParser",
    "parse_options",
    "decode_background",
    "decode_debug_pixel",
    "decode_dimensions",
    "decode_warmup",
    "check_debug_pixel",
    "check_scene_file",
]
