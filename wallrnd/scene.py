"""
Scene: the ordered stack of paint regions that colors the tiles.

Regions are scanned in order and the first one containing a point colors it;
points outside every region take the background color. The pattern recipes
below decide how many regions a scene gets and how their parameters relate.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING
import json
import math
import random

try:
    from .color import Color, ColorItem
    from .geometry import Pos, Frame
    from .paint import Region, Disc, HalfPlane, Triangle, Spiral, Stripe, region_from_dict
except ImportError:
    from color import Color, ColorItem
    from geometry import Pos, Frame
    from paint import Region, Disc, HalfPlane, Triangle, Spiral, Stripe, region_from_dict

if TYPE_CHECKING:
    from .config import SceneConfig


class Pattern(Enum):
    """Available region layouts, by configuration name."""
    FREE_CIRCLES = "free_circles"
    FREE_TRIANGLES = "free_triangles"
    FREE_STRIPES = "free_stripes"
    FREE_SPIRALS = "free_spirals"
    CONCENTRIC_CIRCLES = "concentric_circles"
    PARALLEL_STRIPES = "parallel_stripes"
    CROSSED_STRIPES = "crossed_stripes"
    PARALLEL_WAVES = "parallel_waves"


@dataclass
class Scene:
    """Background color plus regions in priority order (first match wins)."""
    bg: ColorItem
    items: list[Region] = field(default_factory=list)

    @classmethod
    def new(cls, cfg: 'SceneConfig', rng: random.Random) -> 'Scene':
        return cls(bg=cfg.choose_color(rng), items=create_items(cfg, rng))

    def color(self, p: Pos, rng: random.Random) -> Color:
        for item in self.items:
            c = item.contains(p, rng)
            if c is not None:
                return c
        return self.bg.sample(rng)

    def to_dict(self) -> dict:
        return {
            "bg": self.bg.to_dict(),
            "items": [item.to_dict() for item in self.items],
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Scene':
        return cls(
            bg=ColorItem.from_dict(data["bg"]),
            items=[region_from_dict(d) for d in data.get("items", [])],
        )


def save_scene(filepath: Path | str, scene: Scene, frame: Frame) -> None:
    """Record a scene and its frame as JSON so it can be replayed with another tiling."""
    data = scene.to_dict()
    data["frame"] = frame.to_dict()
    with open(Path(filepath), 'w') as f:
        json.dump(data, f, indent=2)


def load_scene(filepath: Path | str) -> tuple[Scene, Frame]:
    """
    Load a scene recorded by save_scene.

    Raises:
        FileNotFoundError: if the file does not exist
        ValueError: if a region record is malformed
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"File not found: {filepath}")
    with open(filepath, 'r') as f:
        data = json.load(f)
    return Scene.from_dict(data), Frame.from_dict(data["frame"])


# =============================================================================
# Pattern recipes
# =============================================================================

def _band_width(cfg: 'SceneConfig') -> float:
    return cfg.width_pattern * min(cfg.frame.w, cfg.frame.h)


def _diagonal(frame: Frame) -> float:
    return math.hypot(frame.w, frame.h)


def create_free_circles(rng: random.Random, cfg: 'SceneConfig') -> list[Disc]:
    items = [
        Disc.random(rng, cfg.frame, cfg.choose_color(rng), cfg.width_pattern)
        for _ in range(cfg.nb_pattern)
    ]
    # Smallest first, otherwise large discs hide them
    items.sort(key=lambda d: d.radius)
    return items


def create_free_triangles(rng: random.Random, cfg: 'SceneConfig') -> list[Triangle]:
    discs = create_free_circles(rng, cfg)
    return [Triangle.random(rng, d) for d in discs]


def create_free_stripes(rng: random.Random, cfg: 'SceneConfig') -> list[Stripe]:
    width = _band_width(cfg)
    return [
        Stripe.random(rng, cfg.frame, cfg.choose_color(rng), width)
        for _ in range(cfg.nb_pattern)
    ]


def create_free_spirals(rng: random.Random, cfg: 'SceneConfig') -> list[Spiral]:
    width = _band_width(cfg)
    return [
        Spiral.random(rng, cfg.frame, cfg.choose_color(rng), width)
        for _ in range(cfg.nb_pattern)
    ]


def create_concentric_circles(rng: random.Random, cfg: 'SceneConfig') -> list[Disc]:
    center = Pos.random(cfg.frame, rng)
    width = _band_width(cfg)
    return [
        Disc(center, width * (i + 1), cfg.choose_color(rng))
        for i in range(cfg.nb_pattern)
    ]


def _half_plane_family(rng: random.Random, cfg: 'SceneConfig', angle: int) -> list[HalfPlane]:
    """Half-planes with limits marching across the frame in direction `angle`."""
    diag = _diagonal(cfg.frame)
    origin = cfg.frame.center() - Pos.polar(angle, diag / 2)
    step = diag / max(cfg.nb_pattern, 1)
    return [
        HalfPlane.random(
            rng,
            origin + Pos.polar(angle, step * (i + 1)),
            angle,
            cfg.var_stripes,
            cfg.choose_color(rng),
        )
        for i in range(cfg.nb_pattern)
    ]


def create_parallel_stripes(rng: random.Random, cfg: 'SceneConfig') -> list[HalfPlane]:
    angle = rng.randrange(0, 360)
    return _half_plane_family(rng, cfg, angle)


def create_crossed_stripes(rng: random.Random, cfg: 'SceneConfig') -> list[HalfPlane]:
    angle = rng.randrange(0, 360)
    first = _half_plane_family(rng, cfg, angle)
    second = _half_plane_family(rng, cfg, angle + 90)
    items = []
    for h1, h2 in zip(first, second):
        items.append(h1)
        items.append(h2)
    return items


def create_waves(rng: random.Random, cfg: 'SceneConfig') -> list[Disc]:
    """Equal large discs shifted along one direction; each shows as a curved band."""
    angle = rng.randrange(0, 360)
    diag = _diagonal(cfg.frame)
    radius = diag * rng.uniform(0.5, 1.5)
    origin = cfg.frame.center() - Pos.polar(angle, radius + diag / 2)
    step = diag / max(cfg.nb_pattern, 1)
    return [
        Disc(origin + Pos.polar(angle, step * (i + 1)), radius, cfg.choose_color(rng))
        for i in range(cfg.nb_pattern)
    ]


PATTERN_RECIPES = {
    Pattern.FREE_CIRCLES: create_free_circles,
    Pattern.FREE_TRIANGLES: create_free_triangles,
    Pattern.FREE_STRIPES: create_free_stripes,
    Pattern.FREE_SPIRALS: create_free_spirals,
    Pattern.CONCENTRIC_CIRCLES: create_concentric_circles,
    Pattern.PARALLEL_STRIPES: create_parallel_stripes,
    Pattern.CROSSED_STRIPES: create_crossed_stripes,
    Pattern.PARALLEL_WAVES: create_waves,
}


def create_items(cfg: 'SceneConfig', rng: random.Random) -> list[Region]:
    return list(PATTERN_RECIPES[cfg.pattern](rng, cfg))
