"""
Tilings of the image frame.

Every tiling produces a list of tiles (representative point, closed path)
covering the frame. All tilings except the Delaunay one are periodic and
are built on top of periodic_grid_tiling, which flood-fills the lattice
spanned by two basis vectors starting from the frame center.
"""

from enum import Enum
from typing import Callable, Optional
import math
import random

import numpy as np
from scipy.spatial import Delaunay, QhullError

try:
    from .geometry import Pos, Path, Frame, Tile, DegenerateGeometryError
    from .shapes import Movable, Pentagon
except ImportError:
    from geometry import Pos, Path, Frame, Tile, DegenerateGeometryError
    from shapes import Movable, Pentagon


# Lattice sites closer than this (per coordinate) are the same site
LATTICE_PRECISION = 100  # 1 / 0.01

# Relative tolerance below which two basis vectors count as parallel
PARALLEL_TOLERANCE = 1e-9

NEIGHBOURS = ((0, 1), (0, -1), (1, 0), (-1, 0))


class Tiling(Enum):
    """Available tilings, by configuration name."""
    HEXAGONS = "hexagons"
    TRIANGLES = "triangles"
    HEXAGONS_AND_TRIANGLES = "hexagons_and_triangles"
    SQUARES_AND_TRIANGLES = "squares_and_triangles"
    RHOMBUS = "rhombus"
    PENTAGONS = "pentagons"
    DELAUNAY = "delaunay"


def lattice_key(p: Pos) -> tuple[int, int]:
    """Rounded coordinates identifying a lattice site."""
    return (round(p.x * LATTICE_PRECISION), round(p.y * LATTICE_PRECISION))


def check_basis(idir: Pos, jdir: Pos) -> None:
    """
    Reject basis vectors that do not span the plane.

    Raises:
        DegenerateGeometryError: if either vector is zero or they are parallel
    """
    ni = math.sqrt(idir.dot_self())
    nj = math.sqrt(jdir.dot_self())
    if ni < 1e-9 or nj < 1e-9:
        raise DegenerateGeometryError(f"Zero-length basis vector: {idir}, {jdir}")
    if abs(idir.cross(jdir)) < PARALLEL_TOLERANCE * ni * nj:
        raise DegenerateGeometryError(f"Basis vectors are parallel: {idir}, {jdir}")


def site_budget(frame: Frame, idir: Pos, jdir: Pos) -> int:
    """Generous upper bound on the number of in-frame lattice sites."""
    reach = max(math.sqrt(idir.dot_self()), math.sqrt(jdir.dot_self()))
    cell = abs(idir.cross(jdir))
    return int(2 * (frame.w + 2 * reach) * (frame.h + 2 * reach) / cell) + 16


def periodic_grid_tiling(
    frame: Frame,
    gen: Callable[[Pos], list[Tile]],
    idir: Pos,
    jdir: Pos,
    max_sites: Optional[int] = None,
    debug: bool = False
) -> list[Tile]:
    """
    Tile the frame with a pattern that maps to a 2D grid.

    Starting from the frame center, visits every site center + i*idir + j*jdir
    reachable through in-frame sites. Each in-frame site is passed to `gen`,
    whose tiles are collected; out-of-frame sites are neither rendered nor
    expanded.

    Args:
        frame: Area to cover
        gen: Maps a lattice site to zero or more tiles
        idir, jdir: Lattice basis vectors (must be linearly independent)
        max_sites: Cap on rendered sites (default: derived from the frame)
        debug: If True, print traversal statistics

    Returns:
        Tiles in traversal order.

    Raises:
        DegenerateGeometryError: if the basis is degenerate
        RuntimeError: if more than `max_sites` sites fall inside the frame
    """
    check_basis(idir, jdir)
    if max_sites is None:
        max_sites = site_budget(frame, idir, jdir)

    items = []
    center = frame.center()
    visited = {lattice_key(center)}
    stack = [center]
    rendered = 0
    while stack:
        pos = stack.pop()
        if not frame.is_inside(pos):
            continue
        rendered += 1
        if rendered > max_sites:
            raise RuntimeError(f"Lattice exploration exceeded {max_sites} sites")
        items.extend(gen(pos))
        for i, j in NEIGHBOURS:
            p = pos + idir * i + jdir * j
            key = lattice_key(p)
            if key not in visited:
                visited.add(key)
                stack.append(p)

    if debug:
        print(f"  Visited sites: {len(visited)}")
        print(f"  Rendered sites: {rendered}")
        print(f"  Tiles: {len(items)}")

    return items


def tile_hexagons(frame: Frame, size: float, rot: float) -> list[Tile]:
    idir = Pos.polar(rot - 30, size * 2 * math.cos(math.radians(30)))
    jdir = Pos.polar(rot + 30, size * 2 * math.cos(math.radians(30)))
    m = Movable.hexagon(size, rot)
    return periodic_grid_tiling(frame, lambda p: [m.render(p)], idir, jdir)


def tile_triangles(frame: Frame, size: float, rot: float) -> list[Tile]:
    idir = Pos.polar(rot - 30, size * 2 * math.cos(math.radians(30)))
    jdir = Pos.polar(rot + 30, size * 2 * math.cos(math.radians(30)))
    adjust = Pos.polar(rot + 60, size * math.sin(math.radians(30))) + idir * 0.5
    m1 = Movable.triangle(size, rot + 60)
    m2 = Movable.triangle(size, rot)
    return periodic_grid_tiling(
        frame, lambda p: [m1.render(p), m2.render(p + adjust)], idir, jdir
    )


def tile_hybrid_hexagons_triangles(frame: Frame, size: float, rot: float) -> list[Tile]:
    """Trihexagonal tiling: hexagons touching at vertices, triangles in between."""
    idir = Pos.polar(rot, size * 2)
    jdir = Pos.polar(rot + 60, size * 2)
    adjust = Pos.polar(rot + 30, size / math.cos(math.radians(30)))
    # Triangle with the same side length as the hexagon
    small = size * math.tan(math.radians(30))
    m = (
        Movable.hexagon(size, rot),
        Movable.triangle(small, rot + 30),
        Movable.triangle(small, rot + 90),
    )
    return periodic_grid_tiling(
        frame,
        lambda p: [m[0].render(p), m[1].render(p + adjust), m[2].render(p - adjust)],
        idir,
        jdir,
    )


def tile_hybrid_squares_triangles(frame: Frame, size: float, rot: float) -> list[Tile]:
    a = size / math.sqrt(2)
    b = a * math.tan(math.radians(30))
    c = a / math.cos(math.radians(30))
    #
    #  +---------------+,
    #  |            ,' |,'-,
    #  |          x'   | 'c '-,
    #  |        ,'     |   ',  '-,
    #  |       +---a---|--b--+    :-
    #  |               |       ,-'
    #  |               |    ,-'
    #  |               | ,-'
    #  +---------------+'
    #
    reach = c + 2 * a + 2 * b
    idir = Pos.polar(rot, reach) + Pos.polar(rot + 60, reach)
    jdir = Pos.polar(rot, reach) + Pos.polar(rot - 60, reach)
    mv = (
        Movable.square(size, rot),
        Movable.square(size, rot + 60),
        Movable.square(size, rot - 60),
        Movable.triangle(c, rot + 60),
        Movable.triangle(c, rot),
        Movable.triangle(c, rot + 90),
        Movable.triangle(c, rot + 30),
    )

    def gen(pos: Pos) -> list[Tile]:
        items = [
            mv[4].render(pos + Pos.polar(rot, reach)),
            mv[3].render(pos - Pos.polar(rot, reach)),
        ]
        for i in range(6):
            items.append(mv[3 + i % 2].render(pos + Pos.polar(rot + i * 60, c)))
            items.append(mv[i % 3].render(pos + Pos.polar(rot + i * 60, c + b + a)))
            items.append(mv[5 + i % 2].render(pos + Pos.polar(rot + i * 60 + 30, 2 * a + c)))
        return items

    return periodic_grid_tiling(frame, gen, idir, jdir)


def tile_rhombus(frame: Frame, ldiag: float, sdiag: float, rot: float) -> list[Tile]:
    idir = Pos.polar(rot, ldiag) + Pos.polar(rot + 90, sdiag)
    jdir = Pos.polar(rot, -ldiag) + Pos.polar(rot + 90, sdiag)
    m = Movable.rhombus(ldiag, sdiag, rot)
    return periodic_grid_tiling(frame, lambda p: [m.render(p)], idir, jdir)


# Interior angles of the type-1 pentagon: B + C = 180 and A + D + E = 360
PENTAGON_ANGLES = (130, 110, 70, 110, 120)


def tile_pentagons(frame: Frame, size: float, rot: float) -> list[Tile]:
    """
    Type-1 pentagon tiling.

    Each pentagon is paired with its half-turn about the midpoint M of BC.
    Because B + C = 180, the pair is a centrally symmetric hexagon
    A D' E' A' D E, which tiles the plane by translation.
    """
    pent = Pentagon(sizes=(size, size, size * 1.6), angles=PENTAGON_ANGLES, rot=rot)
    a, b, c, d, e = pent.vertices()
    mid = (b + c) * 0.5
    shift = Path([a, b, c, d, e]).centroid - mid
    m = pent.to_movable()
    m_flip = Movable.from_offsets(-o for o in m.offsets)
    # Half of the hexagon's vertices, relative to its center
    w0, w1, w2 = a - mid, mid - d, mid - e
    idir = w0 + w1
    jdir = w1 + w2
    return periodic_grid_tiling(
        frame, lambda p: [m.render(p + shift), m_flip.render(p - shift)], idir, jdir
    )


def triangulate(points: list[Pos]) -> list[tuple[int, int, int]]:
    """
    Delaunay triangulation of `points`.

    Returns:
        Index triples into `points`, one per triangle, covering the convex hull.

    Raises:
        DegenerateGeometryError: if fewer than 3 points are given or all are collinear
    """
    if len(points) < 3:
        raise DegenerateGeometryError(f"Need at least 3 points to triangulate, got {len(points)}")
    arr = np.array([p.to_tuple() for p in points], dtype=float)
    if np.linalg.matrix_rank(arr[1:] - arr[0]) < 2:
        raise DegenerateGeometryError("Cannot triangulate collinear points")
    try:
        tri = Delaunay(arr)
    except QhullError as e:
        raise DegenerateGeometryError(f"Triangulation failed: {e}") from e
    return [(int(i), int(j), int(k)) for i, j, k in tri.simplices]


def triangle_centroid(a: Pos, b: Pos, c: Pos) -> Pos:
    return Pos((a.x + b.x + c.x) / 3, (a.y + b.y + c.y) / 3)


def random_delaunay(frame: Frame, rng: random.Random, n: int) -> list[Tile]:
    """Scatter `n` random points in the frame and emit one tile per Delaunay triangle."""
    pts = [Pos.random(frame, rng) for _ in range(n)]
    tiles = []
    for i, j, k in triangulate(pts):
        a, b, c = pts[i], pts[j], pts[k]
        tiles.append((triangle_centroid(a, b, c), Path([a, b, c])))
    return tiles


def make_tiling(
    tiling: Tiling,
    frame: Frame,
    rng: random.Random,
    size: float,
    nb_delaunay: int
) -> list[Tile]:
    """Build the chosen tiling with one random orientation for the whole frame."""
    rot = rng.randrange(360)
    if tiling is Tiling.HEXAGONS:
        return tile_hexagons(frame, size, rot)
    if tiling is Tiling.TRIANGLES:
        return tile_triangles(frame, size, rot)
    if tiling is Tiling.HEXAGONS_AND_TRIANGLES:
        return tile_hybrid_hexagons_triangles(frame, size, rot)
    if tiling is Tiling.SQUARES_AND_TRIANGLES:
        return tile_hybrid_squares_triangles(frame, size, rot)
    if tiling is Tiling.RHOMBUS:
        return tile_rhombus(frame, size, size * math.tan(math.radians(30)), rot)
    if tiling is Tiling.PENTAGONS:
        return tile_pentagons(frame, size, rot)
    if tiling is Tiling.DELAUNAY:
        return random_delaunay(frame, rng, nb_delaunay)
    raise ValueError(f"Unknown tiling: {tiling}")
