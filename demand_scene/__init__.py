"""Command-line front end for the demand-loaded scene renderer.

Turns the renderer's argument vector into an immutable :class:`Options`
record, reporting every problem through a caller-supplied callback.
"""

__version__ = "0.1.0"

from demand_scene.errors import OptionValueError
from demand_scene.options import Options
from demand_scene.parser import parse_options
from demand_scene.usage import DiagnosticCollector, UsageFn, print_usage_and_exit, usage_text

__all__ = [
    "Options",
    "OptionValueError",
    "parse_options",
    "UsageFn",
    "DiagnosticCollector",
    "print_usage_and_exit",
    "usage_text",
]
