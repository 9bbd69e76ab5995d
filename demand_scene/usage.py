"""Diagnostic callbacks and usage text for the renderer command line."""

import sys
from typing import Callable, TextIO

UsageFn = Callable[[str, str], None]
"""Diagnostic sink called with ``(program, message)`` for every parse problem."""

_USAGE = """\
Usage: {program} [options] <scene-file>

Options:
  -f <file>, --file <file>  Render to <file> instead of an interactive window.
  --dim=<w>x<h>             Set image dimensions; defaults to 768x512.
  --bg=<r>/<g>/<b>          Set background color; defaults to 0/0/0.
  --warmup=<n>              Render <n> warmup frames before timing.
  --debug=<x>/<y>           Trace debug output for pixel <x>, <y>.
  --oneshot-geometry        Resolve one proxy geometry per key press.
  --oneshot-material        Resolve one proxy material per key press.
  --oneshot-debug           Emit debug output for one frame per key press.
  --proxy-resolution        Log proxy geometry and material resolution.
  --proxy-geometry          Log proxy geometry resolution.
  --proxy-material          Log proxy material resolution.
  --scene-decomposition     Log scene decomposition.
  --texture-creation        Log texture creation.
  --verbose                 Enable all of the logging options above.
  --sort-proxies            Sort proxies by size before resolving them.
  --sync                    Load and resolve proxies synchronously.
  --face-forward            Make shading normals face the viewer.
"""


def usage_text(program: str) -> str:
    return _USAGE.format(program=program)


def print_usage_and_exit(program: str, message: str, stream: TextIO | None = None) -> None:
    """Report ``message`` with the usage text and terminate the process.

    Args:
        program: Program name shown in the report.
        message: Diagnostic produced by the parser.
        stream: Where to write the report. Defaults to ``sys.stderr``.
    Raises:
        SystemExit: Always, with status 1.
    """
    stream = sys.stderr if stream is None else stream
    stream.write(f"{program}: {message}\n")
    stream.write(usage_text(program))
    raise SystemExit(1)


class DiagnosticCollector:
    """Diagnostic callback that records every report instead of acting on it."""

    def __init__(self) -> None:
        self.reports: list[tuple[str, str]] = []

    def __call__(self, program: str, message: str) -> None:
        self.reports.append((program, message))

    def __len__(self) -> int:
        return len(self.reports)

    @property
    def messages(self) -> list[str]:
        return [message for _, message in self.reports]
