"""
Shape templates placed by the tilers.

A Movable is a polygon given as offsets from its own center, already rotated
to the run's orientation. Rendering it at a position yields a tile.
"""

from dataclasses import dataclass

try:
    from .geometry import Pos, Path, Tile, intersect
except ImportError:
    from geometry import Pos, Path, Tile, intersect


@dataclass(frozen=True)
class Movable:
    """Polygon template: vertex offsets relative to the placement position."""
    offsets: tuple[Pos, ...]

    def __len__(self):
        return len(self.offsets)

    def render(self, position: Pos) -> Tile:
        """Place the template at `position`, keeping vertex order."""
        return position, Path([position + o for o in self.offsets])

    @classmethod
    def from_offsets(cls, offsets) -> 'Movable':
        return cls(tuple(offsets))

    @classmethod
    def regular(cls, sides: int, radius: float, rot: float) -> 'Movable':
        """Regular polygon with circumradius `radius`, first vertex at angle `rot`."""
        step = 360.0 / sides
        return cls(tuple(Pos.polar(rot + i * step, radius) for i in range(sides)))

    @classmethod
    def hexagon(cls, size: float, rot: float) -> 'Movable':
        return cls.regular(6, size, rot)

    @classmethod
    def triangle(cls, size: float, rot: float) -> 'Movable':
        return cls.regular(3, size, rot)

    @classmethod
    def square(cls, size: float, rot: float) -> 'Movable':
        # Edges perpendicular to `rot`
        return cls.regular(4, size, rot + 45)

    @classmethod
    def rhombus(cls, ldiag: float, sdiag: float, rot: float) -> 'Movable':
        """Rhombus with half-diagonals `ldiag` (along rot) and `sdiag` (across)."""
        return cls((
            Pos.polar(rot, ldiag),
            Pos.polar(rot + 90, sdiag),
            Pos.polar(rot + 180, ldiag),
            Pos.polar(rot + 270, sdiag),
        ))


@dataclass(frozen=True)
class Pentagon:
    """
    Convex pentagon ABCDE described by three side lengths and five interior angles.

    `sizes` are the lengths of AE, AB and BC. The vertices are built by walking
    counter-clockwise from A in direction `rot`; D is where the lines through C
    and E meet. With angles[1] + angles[2] == 180 the sides AB and CD are
    parallel, which is what the type-1 tiling relies on.
    """
    sizes: tuple[float, float, float]
    angles: tuple[float, float, float, float, float]
    rot: float = 0.0

    def vertices(self) -> list[Pos]:
        alpha, beta, gamma, _, epsilon = self.angles
        a = Pos.zero()
        b = a + Pos.polar(self.rot, self.sizes[1])
        c = b + Pos.polar(self.rot + 180 - beta, self.sizes[2])
        e = a + Pos.polar(self.rot + alpha, self.sizes[0])
        d = intersect(
            (c, self.rot + 360 - beta - gamma),
            (e, self.rot + alpha + epsilon),
        )
        return [a, b, c, d, e]

    def to_movable(self) -> Movable:
        """Template centered on the vertex mean."""
        pts = self.vertices()
        mid = Path(pts).centroid
        return Movable.from_offsets(p - mid for p in pts)
