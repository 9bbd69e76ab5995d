#!/usr/bin/env python3
"""Parse the renderer command line and show the resulting configuration.

    python -m demand_scene --dim=1024x768 --verbose scene.pbrt
"""

import sys
from typing import Sequence

from loguru import logger

from demand_scene.parser import parse_options
from demand_scene.usage import DiagnosticCollector, usage_text


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Argument vector including the program name. Defaults to ``sys.argv``.
    Returns:
        Process exit status: 1 if any problem was reported, else 0.
    """
    argv = sys.argv if argv is None else argv
    diagnostics = DiagnosticCollector()
    options = parse_options(argv, diagnostics)

    if diagnostics:
        for program, message in diagnostics.reports:
            sys.stderr.write(f"{program}: {message}\n")
        sys.stderr.write(usage_text(options.program))
        return 1

    options.print()
    if options.interactive:
        logger.info("No output file given; the renderer would open an interactive window.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
