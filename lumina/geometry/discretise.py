"""Fill shapes with cubic lattices of dipole positions.

The lattice spacing ``d`` should satisfy the CDA validity criterion
``d << wavelength / (2 * pi * |m|)``, where ``m`` is the complex refractive
index of the material.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from itertools import product
from typing import Optional

from lumina.geometry.parsers import ObjMesh
from lumina.geometry.primitives import Primitive

Vec3 = tuple[float, float, float]

# Offsets applied to x and y before ray casting, so that a ray never runs
# exactly through a shared edge or vertex and gets counted twice.
_PERTURB_X = 1.23e-10
_PERTURB_Y = 2.34e-10
_PARALLEL_EPS = 1e-12


@dataclass(frozen=True)
class LatticePoint:
    """A dipole position (nm) produced by discretisation."""

    position: Vec3


def _check_spacing(spacing: float) -> None:
    if not spacing > 0.0:
        raise ValueError("Dipole spacing must be positive")


def _grid(box: tuple[Sequence[float], Sequence[float]], spacing: float) -> Iterator[Vec3]:
    """Cubic grid points centred on the box midpoint, covering the box.

    Points are produced with x varying slowest and z fastest.
    """
    low, high = box
    centre = [0.5 * (lo + hi) for lo, hi in zip(low, high)]
    axes = []
    for c, hi in zip(centre, high):
        n = int(math.floor((hi - c) / spacing))
        axes.append([c + i * spacing for i in range(-n, n + 1)])
    for x, y, z in product(*axes):
        yield (x, y, z)


def _fill(
    box: tuple[Sequence[float], Sequence[float]],
    spacing: float,
    inside: Callable[[Vec3], bool],
) -> list[LatticePoint]:
    return [LatticePoint(p) for p in _grid(box, spacing) if inside(p)]


def discretise_primitive(primitive: Primitive, spacing: float) -> list[LatticePoint]:
    """Lattice points, ``spacing`` nm apart, that lie within ``primitive``."""
    _check_spacing(spacing)
    return _fill(primitive.bounding_box(), spacing, primitive.contains)


def discretise_mesh(mesh: ObjMesh, spacing: float) -> list[LatticePoint]:
    """Lattice points, ``spacing`` nm apart, that lie within a closed triangle mesh."""
    _check_spacing(spacing)
    return _fill(
        mesh.bounding_box(),
        spacing,
        lambda p: mesh_contains(mesh.vertices, mesh.faces, p),
    )


def mesh_contains(
    vertices: Sequence[Sequence[float]],
    faces: Sequence[Sequence[int]],
    point: Sequence[float],
) -> bool:
    """Whether ``point`` is inside a closed mesh, by counting +z ray crossings."""
    origin = (point[0] + _PERTURB_X, point[1] + _PERTURB_Y, point[2])
    crossings = sum(
        1
        for a, b, c in faces
        if ray_triangle_z(origin, vertices[a], vertices[b], vertices[c]) is not None
    )
    return crossings % 2 == 1


def ray_triangle_z(
    origin: Sequence[float],
    v0: Sequence[float],
    v1: Sequence[float],
    v2: Sequence[float],
) -> Optional[float]:
    """Distance ``t > 0`` along +z from ``origin`` to the triangle, or None on a miss."""
    e1 = (v1[0] - v0[0], v1[1] - v0[1], v1[2] - v0[2])
    e2 = (v2[0] - v0[0], v2[1] - v0[1], v2[2] - v0[2])

    # P = D x E2 with D = (0, 0, 1).
    px = -e2[1]
    py = e2[0]

    det = e1[0] * px + e1[1] * py
    if abs(det) < _PARALLEL_EPS:
        return None
    inv_det = 1.0 / det

    tx = origin[0] - v0[0]
    ty = origin[1] - v0[1]
    tz = origin[2] - v0[2]

    u = (tx * px + ty * py) * inv_det
    if u < 0.0 or u > 1.0:
        return None

    # Q = T x E1
    qx = ty * e1[2] - tz * e1[1]
    qy = tz * e1[0] - tx * e1[2]
    qz = tx * e1[1] - ty * e1[0]

    v = qz * inv_det
    if v < 0.0 or u + v > 1.0:
        return None

    t = (e2[0] * qx + e2[1] * qy + e2[2] * qz) * inv_det
    return t if t > 0.0 else None