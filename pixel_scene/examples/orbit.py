"""Two-circle orbit demo.

A red circle sits still in a normal layer while a green circle orbits it in
an additive (``lighter``) layer above a black background, so their overlap
renders yellow. Only pixels swept by the moving circle are redrawn each
frame.

Run ``python -m pixel_scene.examples.orbit --frames 120 --out orbit.gif``
to export an animated GIF.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, replace
from typing import List, Mapping, Optional, Sequence

from PIL import Image

from pixel_scene.animation import AnimationLoop, orbit_point
from pixel_scene.canvas import Canvas
from pixel_scene.config import SceneConfig, config_from_env
from pixel_scene.drawables import Background, Sprite, create_circle
from pixel_scene.layer import Layer
from pixel_scene.point import Point, PointCache
from pixel_scene.renderer.surface import ImageSurface
from pixel_scene.types import BlendMode

logger = logging.getLogger(__name__)

ORBIT_CENTER = Point(95, 95)
ORBIT_RADIUS = 5
ORBIT_PERIOD_MS = 1000.0


@dataclass
class OrbitScene:
    canvas: Canvas
    still: Sprite
    orbiter: Sprite

    def update(self, t: float) -> None:
        self.orbiter.move(
            orbit_point(t, ORBIT_CENTER, ORBIT_RADIUS, ORBIT_PERIOD_MS)
        )


def build_orbit_scene(config: Optional[SceneConfig] = None) -> OrbitScene:
    config = config or SceneConfig()
    points = PointCache()
    still = create_circle(points.intern(95, 95), "#FF0000", points=points)
    orbiter = create_circle(points.intern(100, 95), "#00FF00", points=points)
    canvas = Canvas(
        [
            Layer([Background(config.background)]),
            Layer([still]),
            Layer([orbiter], BlendMode.LIGHTER),
        ],
        points=points,
        config=config,
    )
    return OrbitScene(canvas=canvas, still=still, orbiter=orbiter)


def render_frames(
    times: Sequence[float], config: Optional[SceneConfig] = None
) -> List[Image.Image]:
    """Snapshot the surface after each tick in ``times``."""
    config = config or SceneConfig()
    scene = build_orbit_scene(config)
    surface = ImageSurface(config.width, config.height, config.background)
    frames: List[Image.Image] = []

    loop = AnimationLoop(fps=config.fps)
    loop.on_tick(scene.update)
    loop.on_tick(lambda t: scene.canvas.draw(surface))
    loop.on_tick(lambda t: frames.append(surface.to_image()))
    loop.run(times)
    return frames


def resolve_config(
    size: Optional[int] = None, environ: Optional[Mapping[str, str]] = None
) -> SceneConfig:
    """Environment config, with both sides set to ``size`` when it is given."""
    config = config_from_env(environ=environ)
    if size is None:
        return config
    return replace(config, width=size, height=size)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--frames", type=int, default=120)
    parser.add_argument(
        "--size", type=int, default=None, help="Square surface size (overrides env)"
    )
    parser.add_argument("--out", default="orbit.gif")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = resolve_config(args.size)
    interval_ms = 1000.0 / config.fps
    frames = render_frames([i * interval_ms for i in range(args.frames)], config)
    if not frames:
        logger.warning("no frames rendered")
        return 1
    frames[0].save(
        args.out,
        save_all=True,
        append_images=frames[1:],
        duration=int(interval_ms),
        loop=0,
    )
    logger.info("wrote %s frames to %s", len(frames), args.out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
