"""Scene configuration.

``SceneConfig`` is a frozen dataclass; derive variants with
``dataclasses.replace``. :func:`config_from_env` layers environment overrides
(``PIXEL_SCENE_WIDTH``, ``PIXEL_SCENE_HEIGHT``, ``PIXEL_SCENE_BACKGROUND``,
``PIXEL_SCENE_POINT_CACHE_SCOPE``, ``PIXEL_SCENE_FPS``) on top of a base
config.
"""

from dataclasses import dataclass, replace
from enum import StrEnum, auto
import os
from typing import Any, Dict, Mapping, Optional

from pixel_scene.types import ColorLike, to_color


class PointCacheScope(StrEnum):
    """Lifetime of a canvas' interned points."""

    SESSION = auto()
    FRAME = auto()


@dataclass(frozen=True)
class SceneConfig:
    """Rendering parameters shared by the canvas, surfaces and drivers.

    Attributes:
        width: Surface width in pixels.
        height: Surface height in pixels.
        background: Initial surface fill color.
        point_cache_scope: ``FRAME`` clears interned points before every draw.
        fps: Target frame rate of the real-time animation loop.
    """

    width: int = 500
    height: int = 500
    background: ColorLike = "#000"
    point_cache_scope: PointCacheScope = PointCacheScope.SESSION
    fps: float = 60.0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Scene size must be non-negative: {self.width}x{self.height}"
            )
        if self.fps <= 0:
            raise ValueError(f"fps must be positive: {self.fps}")
        to_color(self.background)
        object.__setattr__(
            self, "point_cache_scope", PointCacheScope(self.point_cache_scope)
        )


DEFAULT_SCENE_CONFIG = SceneConfig()


def config_from_env(
    base: Optional[SceneConfig] = None,
    environ: Optional[Mapping[str, str]] = None,
    prefix: str = "PIXEL_SCENE_",
) -> SceneConfig:
    """Apply environment overrides to ``base``.

    Raises:
        ValueError: If a variable cannot be parsed or yields an invalid config.
    """
    base = base or DEFAULT_SCENE_CONFIG
    env = os.environ if environ is None else environ
    overrides: Dict[str, Any] = {}
    parsers = {
        "width": int,
        "height": int,
        "background": str,
        "point_cache_scope": PointCacheScope,
        "fps": float,
    }
    for field, parse in parsers.items():
        raw = env.get(prefix + field.upper())
        if raw is None:
            continue
        try:
            overrides[field] = parse(raw)
        except ValueError as exc:
            raise ValueError(f"Invalid {prefix + field.upper()}={raw!r}") from exc
    return replace(base, **overrides)
