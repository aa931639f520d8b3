"""
wallrnd - Random tiled wallpapers

Tiles a frame with a periodic or Delaunay tessellation and colors every tile
from a stack of randomly placed paint regions, then writes the result as SVG.
"""

__version__ = "1.0.0"

from .geometry import Pos, Frame, Path, DegenerateGeometryError
from .color import Color, ColorItem, Chooser
from .scene import Scene, Pattern
from .tiling import Tiling
from .config import SceneConfig, MetaConfig
