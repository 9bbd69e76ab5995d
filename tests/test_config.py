import dataclasses

from loguru import logger

from demand_scene.options import Options
from demand_scene.utils import configclass


@configclass
class _Sample:
    name: str = "x"
    size: tuple[int, int] = (1, 2)

    def replace(self, **changes):
        return "overridden"


def test_to_dict_uses_lists_for_vectors() -> None:
    cfg = Options(scene_file="scene.pbrt", background=(0.1, 0.2, 0.3))

    cfg_dict = cfg.to_dict()
    assert cfg_dict["background"] == [0.1, 0.2, 0.3]
    assert cfg_dict["debug_pixel"] == [0, 0]
    assert cfg_dict["scene_file"] == "scene.pbrt"
    assert list(cfg_dict) == [f.name for f in dataclasses.fields(Options)]


def test_replace_returns_new_record() -> None:
    cfg = Options()

    changed = cfg.replace(width=64)
    assert changed.width == 64
    assert cfg.width == 768


def test_print_logs_yaml() -> None:
    messages: list[str] = []
    handler_id = logger.add(lambda msg: messages.append(msg.record["message"]))
    try:
        Options(program="prog").print()
    finally:
        logger.remove(handler_id)

    assert messages[0].startswith("Configuration:\nprogram: prog\n")


def test_existing_methods_are_kept() -> None:
    sample = _Sample()

    assert sample.replace(name="y") == "overridden"
    assert sample.to_dict() == {"name": "x", "size": [1, 2]}


def test_interactive_property() -> None:
    assert Options().interactive
    assert not Options(out_file="out.png").interactive
