"""
Configuration for wallpaper generation.

MetaConfig is what the configuration file describes: weighted choices of
tilings and patterns, and color themes that may be restricted to a time of
day. Picking from it yields a SceneConfig, the concrete parameters of one run.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import json
import random

try:
    from .color import Color, ColorItem, Chooser
    from .geometry import Frame, Tile
    from .scene import Pattern
    from .tiling import Tiling, make_tiling
except ImportError:
    from color import Color, ColorItem, Chooser
    from geometry import Frame, Tile
    from scene import Pattern
    from tiling import Tiling, make_tiling


@dataclass
class SceneConfig:
    """
    Concrete parameters of one generation run.

    Attributes:
        theme: Weighted theme colors; each region draws one
        weight: Pull of region colors toward their theme color
        deviation: Per-channel random deviation of color samples
        frame: Image area
        pattern: Region layout
        tiling: Tiling of the frame
        nb_pattern: Number of regions the pattern creates
        var_stripes: Angular jitter of stripes (degrees)
        size_tiling: Characteristic tile size (pixels)
        nb_delaunay: Number of random points for the Delaunay tiling
        width_pattern: Region size/band width as a fraction of min(width, height)
        line_color: Tile outline color
        line_width: Tile outline width (0 = outline in the fill color)
    """
    theme: Chooser = field(default_factory=Chooser)
    weight: int = 40
    deviation: int = 20
    frame: Frame = Frame(1920, 1080)
    pattern: Pattern = Pattern.FREE_CIRCLES
    tiling: Tiling = Tiling.HEXAGONS
    nb_pattern: int = 10
    var_stripes: int = 15
    size_tiling: float = 15.0
    nb_delaunay: int = 1000
    width_pattern: float = 0.1
    line_color: Color = Color(0, 0, 0)
    line_width: float = 1.0

    def choose_color(self, rng: random.Random) -> ColorItem:
        """Fresh color source: random shade pulled toward one of the theme colors."""
        theme = self.theme.choose(rng)
        return ColorItem(
            shade=Color.random(rng),
            deviation=self.deviation,
            theme=theme if theme is not None else Color(0, 0, 0),
            weight=self.weight,
        )

    def make_tiling(self, rng: random.Random) -> list[Tile]:
        return make_tiling(self.tiling, self.frame, rng, self.size_tiling, self.nb_delaunay)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "theme": [[c.to_hex(), w] for c, w in self.theme.items],
            "weight": self.weight,
            "deviation": self.deviation,
            "frame": self.frame.to_dict(),
            "pattern": self.pattern.value,
            "tiling": self.tiling.value,
            "nb_pattern": self.nb_pattern,
            "var_stripes": self.var_stripes,
            "size_tiling": self.size_tiling,
            "nb_delaunay": self.nb_delaunay,
            "width_pattern": self.width_pattern,
            "line_color": self.line_color.to_hex(),
            "line_width": self.line_width,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SceneConfig":
        """Create from dictionary."""
        theme = Chooser()
        for hex_color, w in data.get("theme", []):
            theme.push(Color.from_hex(hex_color), w)
        return cls(
            theme=theme,
            weight=data.get("weight", 40),
            deviation=data.get("deviation", 20),
            frame=Frame.from_dict(data.get("frame", {"width": 1920, "height": 1080})),
            pattern=Pattern(data.get("pattern", Pattern.FREE_CIRCLES.value)),
            tiling=Tiling(data.get("tiling", Tiling.HEXAGONS.value)),
            nb_pattern=data.get("nb_pattern", 10),
            var_stripes=data.get("var_stripes", 15),
            size_tiling=data.get("size_tiling", 15.0),
            nb_delaunay=data.get("nb_delaunay", 1000),
            width_pattern=data.get("width_pattern", 0.1),
            line_color=Color.from_hex(data.get("line_color", "#000000")),
            line_width=data.get("line_width", 1.0),
        )


@dataclass
class Theme:
    """
    Named set of weighted colors, optionally active only part of the day.

    `start` and `end` are times as HHMM integers; a window with start > end
    wraps around midnight. A theme without a window is always active;
    a window with start == end is never active and is rejected by
    MetaConfig.validate.
    """
    name: str
    colors: dict[str, int] = field(default_factory=dict)
    start: Optional[int] = None
    end: Optional[int] = None

    def is_active(self, time: int) -> bool:
        if self.start is None or self.end is None:
            return True
        if self.start <= self.end:
            return self.start <= time < self.end
        return time >= self.start or time < self.end

    def chooser(self) -> Chooser:
        chooser = Chooser()
        for hex_color, weight in self.colors.items():
            chooser.push(Color.from_hex(hex_color), weight)
        return chooser

    def to_dict(self) -> dict:
        data = {"name": self.name, "colors": dict(self.colors)}
        if self.start is not None and self.end is not None:
            data["start"] = self.start
            data["end"] = self.end
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Theme":
        return cls(
            name=data.get("name", ""),
            colors=dict(data.get("colors", {})),
            start=data.get("start"),
            end=data.get("end"),
        )


def _valid_time(t: int) -> bool:
    return 0 <= t <= 2400 and t % 100 < 60


@dataclass
class MetaConfig:
    """
    Contents of the configuration file.

    Numeric parameters are shared by every run; tilings, patterns and themes
    are drawn at random per run with the given weights. Empty tiling or
    pattern tables mean "all, uniformly".
    """
    width: int = 1920
    height: int = 1080
    weight: int = 40
    deviation: int = 20
    nb_pattern: int = 10
    var_stripes: int = 15
    size_tiling: float = 15.0
    nb_delaunay: int = 1000
    width_pattern: float = 0.1
    line_color: str = "#000000"
    line_width: float = 1.0
    tilings: dict[str, int] = field(default_factory=dict)
    patterns: dict[str, int] = field(default_factory=dict)
    themes: list[Theme] = field(default_factory=list)

    def validate(self) -> list[str]:
        """
        Validate configuration values.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if self.width <= 0 or self.height <= 0:
            errors.append(f"frame must have positive dimensions, got {self.width}x{self.height}")
        if self.weight < 0:
            errors.append(f"weight cannot be negative, got {self.weight}")
        if self.deviation < 0:
            errors.append(f"deviation cannot be negative, got {self.deviation}")
        if self.nb_pattern < 0:
            errors.append(f"nb_pattern cannot be negative, got {self.nb_pattern}")
        if self.var_stripes < 0:
            errors.append(f"var_stripes cannot be negative, got {self.var_stripes}")
        if self.size_tiling <= 0:
            errors.append(f"size_tiling must be positive, got {self.size_tiling}")
        if self.nb_delaunay < 3:
            errors.append(f"nb_delaunay must be >= 3, got {self.nb_delaunay}")
        if self.width_pattern <= 0:
            errors.append(f"width_pattern must be positive, got {self.width_pattern}")
        if self.line_width < 0:
            errors.append(f"line_width cannot be negative, got {self.line_width}")
        try:
            Color.from_hex(self.line_color)
        except (ValueError, AttributeError):
            errors.append(f"Invalid line_color: {self.line_color!r}")

        tiling_names = {t.value for t in Tiling}
        for name in self.tilings:
            if name not in tiling_names:
                errors.append(f"Unknown tiling: {name}")
        pattern_names = {p.value for p in Pattern}
        for name in self.patterns:
            if name not in pattern_names:
                errors.append(f"Unknown pattern: {name}")

        for theme in self.themes:
            for hex_color in theme.colors:
                try:
                    Color.from_hex(hex_color)
                except ValueError:
                    errors.append(f"Theme {theme.name!r}: invalid color {hex_color!r}")
            for t in (theme.start, theme.end):
                if t is not None and not _valid_time(t):
                    errors.append(f"Theme {theme.name!r}: invalid time {t} (expected HHMM)")
            if theme.start is not None and theme.start == theme.end:
                errors.append(f"Theme {theme.name!r}: empty time window {theme.start}-{theme.end}")

        return errors

    def pick(self, rng: random.Random, time: int) -> SceneConfig:
        """
        Draw the concrete parameters of one run.

        Args:
            rng: Random source
            time: Current time as HHMM, used to select eligible themes

        Raises:
            ValueError: if the configuration names unknown tilings or patterns
        """
        tiling = self._choose_enum(rng, Tiling, self.tilings)
        pattern = self._choose_enum(rng, Pattern, self.patterns)

        active = [t for t in self.themes if t.is_active(time)] or self.themes
        theme = rng.choice(active).chooser() if active else Chooser()

        return SceneConfig(
            theme=theme,
            weight=self.weight,
            deviation=self.deviation,
            frame=Frame(self.width, self.height),
            pattern=pattern,
            tiling=tiling,
            nb_pattern=self.nb_pattern,
            var_stripes=self.var_stripes,
            size_tiling=self.size_tiling,
            nb_delaunay=self.nb_delaunay,
            width_pattern=self.width_pattern,
            line_color=Color.from_hex(self.line_color),
            line_width=self.line_width,
        )

    @staticmethod
    def _choose_enum(rng: random.Random, enum_cls, weights: dict[str, int]):
        chooser = Chooser()
        for name, w in weights.items():
            chooser.push(enum_cls(name), w)
        choice = chooser.choose(rng)
        if choice is None:
            return rng.choice(list(enum_cls))
        return choice

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "width": self.width,
            "height": self.height,
            "weight": self.weight,
            "deviation": self.deviation,
            "nb_pattern": self.nb_pattern,
            "var_stripes": self.var_stripes,
            "size_tiling": self.size_tiling,
            "nb_delaunay": self.nb_delaunay,
            "width_pattern": self.width_pattern,
            "line_color": self.line_color,
            "line_width": self.line_width,
            "tilings": dict(self.tilings),
            "patterns": dict(self.patterns),
            "themes": [t.to_dict() for t in self.themes],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MetaConfig":
        """Create from dictionary."""
        return cls(
            width=data.get("width", 1920),
            height=data.get("height", 1080),
            weight=data.get("weight", 40),
            deviation=data.get("deviation", 20),
            nb_pattern=data.get("nb_pattern", 10),
            var_stripes=data.get("var_stripes", 15),
            size_tiling=data.get("size_tiling", 15.0),
            nb_delaunay=data.get("nb_delaunay", 1000),
            width_pattern=data.get("width_pattern", 0.1),
            line_color=data.get("line_color", "#000000"),
            line_width=data.get("line_width", 1.0),
            tilings=dict(data.get("tilings", {})),
            patterns=dict(data.get("patterns", {})),
            themes=[Theme.from_dict(t) for t in data.get("themes", [])],
        )

    def save(self, filepath: Path | str) -> None:
        """Save configuration to JSON file."""
        filepath = Path(filepath)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, filepath: Path | str) -> "MetaConfig":
        """Load configuration from JSON file."""
        filepath = Path(filepath)
        if not filepath.exists():
            return cls.default()  # Return defaults if file doesn't exist

        with open(filepath, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data)

    @classmethod
    def default(cls) -> "MetaConfig":
        return cls.from_dict(DEFAULT_CONFIG)


# Written by `wallrnd --init`
DEFAULT_CONFIG = {
    "width": 1920,
    "height": 1080,
    "weight": 40,
    "deviation": 20,
    "nb_pattern": 10,
    "var_stripes": 15,
    "size_tiling": 15.0,
    "nb_delaunay": 1000,
    "width_pattern": 0.1,
    "line_color": "#000000",
    "line_width": 1.0,
    "tilings": {
        "hexagons": 10,
        "triangles": 5,
        "hexagons_and_triangles": 5,
        "squares_and_triangles": 5,
        "rhombus": 3,
        "pentagons": 3,
        "delaunay": 5,
    },
    "patterns": {
        "free_circles": 10,
        "free_triangles": 5,
        "free_stripes": 5,
        "free_spirals": 3,
        "concentric_circles": 5,
        "parallel_stripes": 5,
        "crossed_stripes": 5,
        "parallel_waves": 5,
    },
    "themes": [
        {
            "name": "dawn",
            "colors": {"#ffb07c": 3, "#ff6f61": 2, "#6b5b95": 1},
            "start": 500,
            "end": 900,
        },
        {
            "name": "day",
            "colors": {"#4fa3d1": 3, "#a8d5ba": 2, "#f5e663": 1},
            "start": 900,
            "end": 1800,
        },
        {
            "name": "dusk",
            "colors": {"#d1495b": 2, "#edae49": 2, "#00798c": 1},
            "start": 1800,
            "end": 2100,
        },
        {
            "name": "night",
            "colors": {"#1b1b3a": 3, "#2e4057": 2, "#693668": 1},
            "start": 2100,
            "end": 500,
        },
    ],
}
