"""Renderer configuration record produced by the command-line parser."""

from demand_scene.utils import configclass

DEFAULT_WIDTH = 768
DEFAULT_HEIGHT = 512
DEFAULT_BACKGROUND: tuple[float, float, float] = (0.0, 0.0, 0.0)
DEFAULT_DEBUG_PIXEL: tuple[int, int] = (0, 0)

VERBOSE_FIELDS = (
    "verbose_proxy_geometry_resolution",
    "verbose_proxy_material_resolution",
    "verbose_scene_decomposition",
    "verbose_texture_creation",
)
"""Verbosity switches set together by ``--verbose``."""


@configclass(frozen=True)
class Options:
    """Parsed command-line options for the scene renderer."""

    program: str = ""
    """Program name, taken verbatim from the first argument."""
    scene_file: str = ""
    """Scene to load. Required."""
    out_file: str = ""
    """Image to write. Empty means interactive display."""
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    background: tuple[float, float, float] = DEFAULT_BACKGROUND
    """Background color as linear ``(r, g, b)``."""
    oneshot_geometry: bool = False
    oneshot_material: bool = False
    oneshot_debug: bool = False
    verbose_proxy_geometry_resolution: bool = False
    verbose_proxy_material_resolution: bool = False
    verbose_scene_decomposition: bool = False
    verbose_texture_creation: bool = False
    sort_proxies: bool = False
    sync: bool = False
    face_forward: bool = False
    warmup_frames: int = 0
    """Frames rendered before timing starts."""
    debug: bool = False
    debug_pixel: tuple[int, int] = DEFAULT_DEBUG_PIXEL
    """Pixel ``(x, y)`` traced with debug output when ``debug`` is set."""

    @property
    def interactive(self) -> bool:
        """Whether the renderer should open a window instead of writing an image."""
        return not self.out_file
