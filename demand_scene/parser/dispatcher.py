"""Single-pass scan of the renderer command line."""

from dataclasses import dataclass
from typing import Any, Callable, Sequence

from loguru import logger

from demand_scene.errors import MISSING_FILENAME, UNEXPECTED_ARGUMENT, OptionValueError
from demand_scene.options import DEFAULT_HEIGHT, DEFAULT_WIDTH, VERBOSE_FIELDS, Options
from demand_scene.usage import UsageFn

from .decoders import decode_background, decode_debug_pixel, decode_dimensions, decode_warmup
from .validator import check_debug_pixel, check_scene_file


@dataclass(frozen=True)
class ValueFlag:
    """Option that takes a value, inline after ``=`` or as the next token."""

    decode: Callable[[str], Any]
    """Turns the raw value into the field value(s); raises OptionValueError."""
    fields: tuple[str, ...]
    """Fields assigned from the decoded value, unpacked in order when there are several."""
    missing: str
    """Diagnostic reported when the flag is the last token."""
    deferred: bool = False
    """Decoded values are queued and checked once the scan is complete, instead of assigned to ``fields``."""


VALUE_FLAGS: dict[str, ValueFlag] = {
    "--file": ValueFlag(str, ("out_file",), MISSING_FILENAME),
    "--dim": ValueFlag(decode_dimensions, ("width", "height"), "missing dimensions argument"),
    "--bg": ValueFlag(decode_background, ("background",), "missing background color argument"),
    "--warmup": ValueFlag(decode_warmup, ("warmup_frames",), "missing warmup frame count argument"),
    "--debug": ValueFlag(decode_debug_pixel, (), "missing debug pixel argument", deferred=True),
}

SHORT_ALIASES: dict[str, str] = {"-f": "--file"}
"""Short forms. These only take their value from the next token."""

BOOLEAN_FLAGS: dict[str, tuple[str, ...]] = {
    "--oneshot-geometry": ("oneshot_geometry",),
    "--oneshot-material": ("oneshot_material",),
    "--oneshot-debug": ("oneshot_debug",),
    "--proxy-resolution": VERBOSE_FIELDS[:2],
    "--proxy-geometry": ("verbose_proxy_geometry_resolution",),
    "--proxy-material": ("verbose_proxy_material_resolution",),
    "--scene-decomposition": ("verbose_scene_decomposition",),
    "--texture-creation": ("verbose_texture_creation",),
    "--verbose": VERBOSE_FIELDS,
    "--sort-proxies": ("sort_proxies",),
    "--sync": ("sync",),
    "--face-forward": ("face_forward",),
}


def _match_value_flag(token: str) -> tuple[str, str | None] | None:
    """Return ``(flag, inline value)`` for a value flag token, or None."""
    if token in SHORT_ALIASES:
        return SHORT_ALIASES[token], None
    name, separator, value = token.partition("=")
    if name in VALUE_FLAGS:
        return name, value if separator else None
    return None


class OptionParser:
    """Fills an :class:`Options` record from one argument vector.

    Every problem is sent to the ``usage`` callback once, after which the scan
    carries on with the offending field left as it was. Only exceptions raised
    by the callback itself leave :meth:`parse`.
    """

    def __init__(self, argv: Sequence[str], usage: UsageFn) -> None:
        self.argv = list(argv)
        self.usage = usage
        self.program = self.argv[0] if self.argv else ""
        self.values: dict[str, Any] = {"program": self.program}
        self._debug_pixels: list[tuple[int, int]] = []

    def report(self, message: str) -> None:
        logger.debug(f"{self.program}: {message}")
        self.usage(self.program, message)

    def parse(self) -> Options:
        tokens = self.argv[1:]
        index = 0
        while index < len(tokens):
            token = tokens[index]
            index += 1
            matched = _match_value_flag(token)
            if matched is not None:
                flag, value = matched
                if value is None:
                    if index == len(tokens):
                        self.report(VALUE_FLAGS[flag].missing)
                        continue
                    value = tokens[index]
                    index += 1
                self._apply_value(flag, value)
            elif token in BOOLEAN_FLAGS:
                for name in BOOLEAN_FLAGS[token]:
                    self.values[name] = True
                logger.debug(f"Enabled {token}")
            else:
                self._apply_positional(token)
        self._finish()
        return Options(**self.values)

    def _apply_value(self, flag: str, value: str) -> None:
        spec = VALUE_FLAGS[flag]
        try:
            decoded = spec.decode(value)
        except OptionValueError as e:
            self.report(str(e))
            return
        if spec.deferred:
            # Bounds depend on the final dimensions, checked in _finish.
            self._debug_pixels.append(decoded)
        elif len(spec.fields) == 1:
            self.values[spec.fields[0]] = decoded
        else:
            self.values.update(zip(spec.fields, decoded))
        logger.debug(f"Parsed {flag}={value}")

    def _apply_positional(self, token: str) -> None:
        if self.values.get("scene_file"):
            self.report(UNEXPECTED_ARGUMENT)
            return
        self.values["scene_file"] = token
        logger.debug(f"Scene file {token}")

    def _finish(self) -> None:
        width = self.values.get("width", DEFAULT_WIDTH)
        height = self.values.get("height", DEFAULT_HEIGHT)
        for pixel in self._debug_pixels:
            try:
                check_debug_pixel(pixel, width, height)
            except OptionValueError as e:
                self.report(str(e))
            else:
                self.values["debug"] = True
                self.values["debug_pixel"] = pixel
        try:
            check_scene_file(self.values.get("scene_file", ""))
        except OptionValueError as e:
            self.report(str(e))


def parse_options(argv: Sequence[str], usage: UsageFn, argc: int | None = None) -> Options:
    """Parse a renderer command line into :class:`Options`.

    Args:
        argv: Argument vector; ``argv[0]`` is the program name.
        usage: Called with ``(program, message)`` for each problem found, in
            the order found. Parsing continues after each call.
        argc: Number of leading entries of ``argv`` to consider. Defaults to all.
    Returns:
        The parsed options. Fields whose values were rejected keep their defaults.
    """
    if argc is not None:
        argv = argv[:argc]
    return OptionParser(argv, usage).parse()
