"""Checks that need more than one option value."""

from demand_scene.errors import BAD_DEBUG_PIXEL, MISSING_SCENE_FILE, OptionValueError


def check_debug_pixel(pixel: tuple[int, int], width: int, height: int) -> None:
    """Ensure the debug pixel lies inside a ``width`` x ``height`` image.

    Raises:
        OptionValueError: If either coordinate is outside the image.
    """
    x, y = pixel
    if not (0 <= x < width and 0 <= y < height):
        raise OptionValueError(BAD_DEBUG_PIXEL)


def check_scene_file(scene_file: str) -> None:
    if not scene_file:
        raise OptionValueError(MISSING_SCENE_FILE)
