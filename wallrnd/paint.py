"""
Paint regions.

Each region is a geometric shape plus a ColorItem. `contains` answers whether
a point falls inside the shape and, if it does, draws a color for it. A new
color is drawn on every call so that a region's tiles are grainy rather
than flat.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Optional, Union
import math
import random

try:
    from .color import Color, ColorItem
    from .geometry import Pos, Frame, crossprod_sign
except ImportError:
    from color import Color, ColorItem
    from geometry import Pos, Frame, crossprod_sign


def _pos_to_list(p: Pos) -> list[float]:
    return [p.x, p.y]


def _pos_from_list(data) -> Pos:
    return Pos(float(data[0]), float(data[1]))


@dataclass
class Disc:
    """Open disc: points strictly closer than `radius` to `center`."""
    center: Pos
    radius: float
    color: ColorItem
    kind: ClassVar[str] = "disc"

    @classmethod
    def random(cls, rng: random.Random, frame: Frame, color: ColorItem, size_hint: float) -> 'Disc':
        center = Pos.random(frame, rng)
        radius = (rng.random() * size_hint + 0.1) * min(frame.w, frame.h)
        return cls(center, radius, color)

    def contains(self, p: Pos, rng: random.Random) -> Optional[Color]:
        if (self.center - p).dot_self() < self.radius ** 2:
            return self.color.sample(rng)
        return None

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "center": _pos_to_list(self.center),
            "radius": self.radius,
            "color": self.color.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Disc':
        return cls(
            center=_pos_from_list(data["center"]),
            radius=float(data["radius"]),
            color=ColorItem.from_dict(data["color"]),
        )


@dataclass
class HalfPlane:
    """
    Half-plane bounded by the line through `limit` perpendicular to
    (reference - limit), on the side away from `reference`.
    """
    limit: Pos
    reference: Pos
    color: ColorItem
    kind: ClassVar[str] = "half_plane"

    @classmethod
    def random(cls, rng: random.Random, limit: Pos, indic: int, var: int, color: ColorItem) -> 'HalfPlane':
        """
        Reference direction drawn uniformly from the integers indic - var to
        indic + var degrees, both ends included so the jitter is symmetric
        and var == 0 gives exactly `indic`.
        """
        angle = rng.randint(indic - var, indic + var)
        return cls(limit, limit + Pos.polar(angle, 100.0), color)

    def contains(self, p: Pos, rng: random.Random) -> Optional[Color]:
        if (p - self.limit).dot(self.reference - self.limit) < 0:
            return self.color.sample(rng)
        return None

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "limit": _pos_to_list(self.limit),
            "reference": _pos_to_list(self.reference),
            "color": self.color.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'HalfPlane':
        return cls(
            limit=_pos_from_list(data["limit"]),
            reference=_pos_from_list(data["reference"]),
            color=ColorItem.from_dict(data["color"]),
        )


@dataclass
class Triangle:
    """Closed triangle abc (boundary points are inside, for either winding)."""
    a: Pos
    b: Pos
    c: Pos
    color: ColorItem
    kind: ClassVar[str] = "triangle"

    @classmethod
    def random(cls, rng: random.Random, circ: Disc) -> 'Triangle':
        """Triangle inscribed in the circle bounding `circ`, reusing its color."""
        theta0 = rng.randrange(0, 360)
        theta1 = rng.randrange(80, 150)
        theta2 = rng.randrange(80, 150)
        return cls(
            circ.center + Pos.polar(theta0, circ.radius),
            circ.center + Pos.polar(theta0 + theta1, circ.radius),
            circ.center + Pos.polar(theta0 + theta1 + theta2, circ.radius),
            circ.color,
        )

    def contains(self, p: Pos, rng: random.Random) -> Optional[Color]:
        d1 = crossprod_sign(p, self.a, self.b)
        d2 = crossprod_sign(p, self.b, self.c)
        d3 = crossprod_sign(p, self.c, self.a)
        has_neg = d1 < 0 or d2 < 0 or d3 < 0
        has_pos = d1 > 0 or d2 > 0 or d3 > 0
        if not (has_neg and has_pos):
            return self.color.sample(rng)
        return None

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "a": _pos_to_list(self.a),
            "b": _pos_to_list(self.b),
            "c": _pos_to_list(self.c),
            "color": self.color.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Triangle':
        return cls(
            a=_pos_from_list(data["a"]),
            b=_pos_from_list(data["b"]),
            c=_pos_from_list(data["c"]),
            color=ColorItem.from_dict(data["color"]),
        )


@dataclass
class Spiral:
    """Spiral arms of constant `width` winding around `center`, alternately on and off."""
    center: Pos
    width: float
    color: ColorItem
    kind: ClassVar[str] = "spiral"

    @classmethod
    def random(cls, rng: random.Random, frame: Frame, color: ColorItem, width: float) -> 'Spiral':
        return cls(Pos.random(frame, rng), width, color)

    def contains(self, p: Pos, rng: random.Random) -> Optional[Color]:
        d = self.center - p
        theta = math.atan2(d.x, d.y)
        radius = math.sqrt(d.dot_self()) + theta / math.pi * self.width
        if math.floor(radius / self.width) % 2 == 0:
            return self.color.sample(rng)
        return None

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "center": _pos_to_list(self.center),
            "width": self.width,
            "color": self.color.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Spiral':
        return cls(
            center=_pos_from_list(data["center"]),
            width=float(data["width"]),
            color=ColorItem.from_dict(data["color"]),
        )


@dataclass
class Stripe:
    """Open band between the lines through `limit` and `reference`, perpendicular to their join."""
    limit: Pos
    reference: Pos
    color: ColorItem
    kind: ClassVar[str] = "stripe"

    @classmethod
    def random(cls, rng: random.Random, frame: Frame, color: ColorItem, width: float) -> 'Stripe':
        limit = Pos.random(frame, rng)
        reference = limit + Pos.polar(rng.randrange(0, 360), width)
        return cls(limit, reference, color)

    def contains(self, p: Pos, rng: random.Random) -> Optional[Color]:
        dotprod1 = (p - self.limit).dot(self.reference - self.limit)
        dotprod2 = (p - self.reference).dot(self.limit - self.reference)
        if dotprod1 > 0 and dotprod2 > 0:
            return self.color.sample(rng)
        return None

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "limit": _pos_to_list(self.limit),
            "reference": _pos_to_list(self.reference),
            "color": self.color.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Stripe':
        return cls(
            limit=_pos_from_list(data["limit"]),
            reference=_pos_from_list(data["reference"]),
            color=ColorItem.from_dict(data["color"]),
        )


Region = Union[Disc, HalfPlane, Triangle, Spiral, Stripe]

REGION_KINDS: dict[str, type] = {
    cls.kind: cls for cls in (Disc, HalfPlane, Triangle, Spiral, Stripe)
}


def region_from_dict(data: dict) -> Region:
    """
    Rebuild a region from its `to_dict` record.

    Raises:
        ValueError: if the record's kind is unknown
    """
    kind = data.get("kind")
    if kind not in REGION_KINDS:
        raise ValueError(f"Unknown region kind: {kind!r}")
    return REGION_KINDS[kind].from_dict(data)
