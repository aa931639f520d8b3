"""
Plane geometry primitives.

Positions, the rectangular frame that bounds an image, and the closed
polygonal paths produced by the tilers.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import math
import random


class DegenerateGeometryError(ValueError):
    """Raised when a construction needs non-degenerate input and did not get it."""


@dataclass(frozen=True)
class Pos:
    """A 2D position (or offset)."""
    x: float
    y: float

    def __add__(self, other: 'Pos') -> 'Pos':
        return Pos(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Pos') -> 'Pos':
        return Pos(self.x - other.x, self.y - other.y)

    def __neg__(self) -> 'Pos':
        return Pos(-self.x, -self.y)

    def __mul__(self, k: float) -> 'Pos':
        return Pos(self.x * k, self.y * k)

    __rmul__ = __mul__

    def dot(self, other: 'Pos') -> float:
        return self.x * other.x + self.y * other.y

    def dot_self(self) -> float:
        """Squared norm."""
        return self.dot(self)

    def cross(self, other: 'Pos') -> float:
        """Z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    @classmethod
    def zero(cls) -> 'Pos':
        return cls(0.0, 0.0)

    @classmethod
    def polar(cls, angle_deg: float, radius: float) -> 'Pos':
        """Position at `radius` from the origin in direction `angle_deg` (degrees)."""
        a = radians(angle_deg)
        return cls(radius * math.cos(a), radius * math.sin(a))

    @classmethod
    def random(cls, frame: 'Frame', rng: random.Random) -> 'Pos':
        """Uniformly random position inside `frame`."""
        return cls(rng.uniform(0, frame.w), rng.uniform(0, frame.h))


def radians(angle_deg: float) -> float:
    return angle_deg * math.pi / 180.0


def crossprod_sign(p: Pos, a: Pos, b: Pos) -> float:
    """
    Orientation of `p` relative to the directed line a -> b.

    Positive when the turn a -> b -> p is counter-clockwise, negative when it
    is clockwise, zero when the three points are collinear.
    """
    return (b - a).cross(p - a)


def intersect(ray1: tuple[Pos, float], ray2: tuple[Pos, float]) -> Pos:
    """
    Intersection of two lines, each given as (origin, direction in degrees).

    Raises:
        DegenerateGeometryError: if the lines are parallel
    """
    p, a1 = ray1
    q, a2 = ray2
    d1 = Pos.polar(a1, 1.0)
    d2 = Pos.polar(a2, 1.0)
    denom = d1.cross(d2)
    if abs(denom) < 1e-12:
        raise DegenerateGeometryError(f"Rays at {a1} and {a2} degrees are parallel")
    t = (q - p).cross(d2) / denom
    return p + d1 * t


@dataclass(frozen=True)
class Frame:
    """Rectangular image area [0, w] x [0, h]."""
    w: float
    h: float

    def __post_init__(self):
        if self.w <= 0 or self.h <= 0:
            raise ValueError(f"Frame dimensions must be positive, got {self.w}x{self.h}")

    def is_inside(self, p: Pos) -> bool:
        return 0 <= p.x <= self.w and 0 <= p.y <= self.h

    def center(self) -> Pos:
        return Pos(self.w / 2, self.h / 2)

    def to_dict(self) -> dict:
        return {"width": self.w, "height": self.h}

    @classmethod
    def from_dict(cls, data: dict) -> 'Frame':
        return cls(data["width"], data["height"])


@dataclass
class Path:
    """A closed polygonal path; the last vertex connects back to the first."""
    vertices: list[Pos] = field(default_factory=list)

    def __len__(self):
        return len(self.vertices)

    def __getitem__(self, index):
        return self.vertices[index]

    def __iter__(self):
        return iter(self.vertices)

    @property
    def centroid(self) -> Pos:
        """Vertex mean."""
        if not self.vertices:
            return Pos.zero()
        x = sum(v.x for v in self.vertices) / len(self.vertices)
        y = sum(v.y for v in self.vertices) / len(self.vertices)
        return Pos(x, y)

    @property
    def area(self) -> float:
        """Unsigned shoelace area."""
        n = len(self.vertices)
        area = 0.0
        for i in range(n):
            p = self.vertices[i]
            q = self.vertices[(i + 1) % n]
            area += p.x * q.y - q.x * p.y
        return abs(area) / 2.0

    def to_svg_data(self, precision: int = 3) -> str:
        """SVG path data string ("Mx,y Lx,y ... Z")."""
        if not self.vertices:
            return ""
        parts = []
        for i, v in enumerate(self.vertices):
            cmd = "M" if i == 0 else "L"
            parts.append(f"{cmd}{v.x:.{precision}f},{v.y:.{precision}f}")
        parts.append("Z")
        return " ".join(parts)


# A tile as produced by the tilers: (representative point, path)
Tile = tuple[Pos, Path]
