"""Exceptions raised while decoding option values."""

BAD_DIMENSIONS = "bad dimensions value"
BAD_BACKGROUND = "bad background color value"
BAD_WARMUP = "bad warmup frame count value"
BAD_DEBUG_PIXEL = "bad debug pixel value"
MISSING_SCENE_FILE = "missing scene file argument"
MISSING_FILENAME = "missing filename argument"
UNEXPECTED_ARGUMENT = "unexpected argument"


class OptionValueError(ValueError):
    """Raised when an option value does not match its grammar or range.

    The message is the diagnostic reported to the caller, verbatim.
    """

    pass
