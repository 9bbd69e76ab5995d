import pytest

from demand_scene.errors import OptionValueError
from demand_scene.parser import check_debug_pixel, check_scene_file


@pytest.mark.parametrize("pixel", [(0, 0), (767, 511), (384, 256)])
def test_pixel_inside_image(pixel: tuple[int, int]) -> None:
    check_debug_pixel(pixel, 768, 512)


@pytest.mark.parametrize("pixel", [(768, 0), (0, 512), (-1, 0), (1000, 1000)])
def test_pixel_outside_image(pixel: tuple[int, int]) -> None:
    with pytest.raises(OptionValueError, match="bad debug pixel value"):
        check_debug_pixel(pixel, 768, 512)


def test_scene_file_required() -> None:
    check_scene_file("scene.pbrt")
    with pytest.raises(OptionValueError, match="missing scene file argument"):
        check_scene_file("")
