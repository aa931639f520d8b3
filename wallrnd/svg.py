"""
SVG output.

A Document collects filled paths (tile outline, fill, stroke) for one frame
and writes them as an SVG image.
"""

from dataclasses import dataclass, field
from pathlib import Path as FilePath
import random

try:
    from .color import Color
    from .geometry import Frame, Path, Tile
    from .scene import Scene
except ImportError:
    from color import Color
    from geometry import Frame, Path, Tile
    from scene import Scene


# Stroke widths below this mean "outline in the fill color"
STROKE_LIKE_FILL_THRESHOLD = 1e-4
MIN_STROKE_WIDTH = 0.1


@dataclass
class FilledPath:
    """One tile ready for output."""
    path: Path
    fill: Color
    stroke: Color
    stroke_width: float

    def to_svg(self, precision: int = 3) -> str:
        return (
            f'<path d="{self.path.to_svg_data(precision)}" '
            f'fill="{self.fill.to_hex()}" '
            f'stroke="{self.stroke.to_hex()}" '
            f'stroke-width="{self.stroke_width:g}"/>'
        )


@dataclass
class Document:
    """SVG document covering `frame`."""
    frame: Frame
    items: list[FilledPath] = field(default_factory=list)

    def __len__(self):
        return len(self.items)

    def add(self, item: FilledPath) -> None:
        self.items.append(item)

    def to_svg(self, precision: int = 3) -> str:
        w = f"{self.frame.w:g}"
        h = f"{self.frame.h:g}"
        lines = [
            f'<svg xmlns="http://www.w3.org/2000/svg" version="1.1" '
            f'viewBox="0 0 {w} {h}" width="{w}" height="{h}">'
        ]
        for item in self.items:
            lines.append(item.to_svg(precision))
        lines.append("</svg>")
        return "\n".join(lines) + "\n"

    def save(self, filepath: FilePath | str) -> None:
        with open(FilePath(filepath), 'w') as f:
            f.write(self.to_svg())


def paint_tiles(
    frame: Frame,
    tiles: list[Tile],
    scene: Scene,
    rng: random.Random,
    stroke: Color,
    stroke_width: float
) -> Document:
    """
    Color every tile from the scene and collect the result in a Document.

    Each tile is colored by querying the scene at its representative point.
    A stroke width below STROKE_LIKE_FILL_THRESHOLD outlines tiles in their
    own fill color; the written width is never below MIN_STROKE_WIDTH.
    """
    stroke_like_fill = stroke_width < STROKE_LIKE_FILL_THRESHOLD
    width = max(stroke_width, MIN_STROKE_WIDTH)
    document = Document(frame)
    for pos, path in tiles:
        fill = scene.color(pos, rng)
        document.add(FilledPath(
            path=path,
            fill=fill,
            stroke=fill if stroke_like_fill else stroke,
            stroke_width=width,
        ))
    return document
