"""Parametric shapes that enclose a volume and can be filled with dipoles."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields
from typing import Any

Vec3 = tuple[float, float, float]

_TAU = 2.0 * math.pi
_HELIX_SAMPLES = 32
_AXIS_EPS = 1e-15


def _vec3(values: Sequence[float]) -> Vec3:
    x, y, z = (float(v) for v in values)
    return (x, y, z)


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _sub(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _cross(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _unit(axis: Sequence[float]) -> Vec3 | None:
    """The normalised axis, or None when it is (nearly) zero."""
    length = math.sqrt(_dot(axis, axis))
    if length < _AXIS_EPS:
        return None
    return (axis[0] / length, axis[1] / length, axis[2] / length)


def _axial_box(
    start: Vec3, axis: Vec3, height: float, radial: float, pad: float
) -> tuple[Vec3, Vec3]:
    """Box around a tube of radius ``radial`` along ``axis`` from ``start``."""
    low = []
    high = []
    for base, a in zip(start, axis):
        extent = radial * math.sqrt(max(1.0 - a * a, 0.0))
        top = base + a * height
        low.append(min(base, top) - extent - pad)
        high.append(max(base, top) + extent + pad)
    return _vec3(low), _vec3(high)


class Primitive(ABC):
    """A closed volume in 3D space (lengths in nm)."""

    @abstractmethod
    def contains(self, point: Sequence[float]) -> bool:
        """Whether ``point`` lies inside the shape."""

    @abstractmethod
    def bounding_box(self) -> tuple[Vec3, Vec3]:
        """Axis-aligned bounding box as ``(min_corner, max_corner)``."""

    def to_dict(self) -> dict[str, Any]:
        """A plain mapping with a ``type`` tag naming the shape."""
        data: dict[str, Any] = {"type": type(self).__name__}
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            data[f.name] = list(value) if isinstance(value, tuple) else value
        return data


@dataclass(frozen=True)
class Sphere(Primitive):
    """A sphere given by centre and radius."""

    centre: Vec3
    radius: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "centre", _vec3(self.centre))
        object.__setattr__(self, "radius", float(self.radius))

    def contains(self, point: Sequence[float]) -> bool:
        d = _sub(point, self.centre)
        return _dot(d, d) <= self.radius * self.radius

    def bounding_box(self) -> tuple[Vec3, Vec3]:
        r = self.radius
        return (
            _vec3(c - r for c in self.centre),
            _vec3(c + r for c in self.centre),
        )


@dataclass(frozen=True)
class Cylinder(Primitive):
    """A cylinder from its base-cap centre along ``axis`` for ``length``."""

    base_centre: Vec3
    axis: Vec3
    length: float
    radius: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_centre", _vec3(self.base_centre))
        object.__setattr__(self, "axis", _vec3(self.axis))
        object.__setattr__(self, "length", float(self.length))
        object.__setattr__(self, "radius", float(self.radius))

    def contains(self, point: Sequence[float]) -> bool:
        ax = _unit(self.axis)
        if ax is None:
            return False
        dp = _sub(point, self.base_centre)
        proj = _dot(dp, ax)
        if proj < 0.0 or proj > self.length:
            return False
        perp_sq = _dot(dp, dp) - proj * proj
        return perp_sq <= self.radius * self.radius

    def bounding_box(self) -> tuple[Vec3, Vec3]:
        ax = _unit(self.axis) or (0.0, 0.0, 1.0)
        return _axial_box(self.base_centre, ax, self.length, self.radius, 0.0)


@dataclass(frozen=True)
class Cuboid(Primitive):
    """An axis-aligned box given by centre and half-extents."""

    centre: Vec3
    half_extents: Vec3

    def __post_init__(self) -> None:
        object.__setattr__(self, "centre", _vec3(self.centre))
        object.__setattr__(self, "half_extents", _vec3(self.half_extents))

    def contains(self, point: Sequence[float]) -> bool:
        return all(
            abs(p - c) <= h
            for p, c, h in zip(point, self.centre, self.half_extents)
        )

    def bounding_box(self) -> tuple[Vec3, Vec3]:
        return (
            _vec3(c - h for c, h in zip(self.centre, self.half_extents)),
            _vec3(c + h for c, h in zip(self.centre, self.half_extents)),
        )


@dataclass(frozen=True)
class Helix(Primitive):
    """A helical wire of ``wire_radius`` wound at ``radius`` about an axis."""

    base_centre: Vec3
    axis: Vec3
    radius: float
    pitch: float
    turns: float
    wire_radius: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_centre", _vec3(self.base_centre))
        object.__setattr__(self, "axis", _vec3(self.axis))
        for name in ("radius", "pitch", "turns", "wire_radius"):
            object.__setattr__(self, name, float(getattr(self, name)))

    def contains(self, point: Sequence[float]) -> bool:
        ax = _unit(self.axis)
        if ax is None:
            return False

        seed = (1.0, 0.0, 0.0) if abs(ax[0]) < 0.9 else (0.0, 1.0, 0.0)
        along = _dot(seed, ax)
        u_raw = (seed[0] - along * ax[0], seed[1] - along * ax[1], seed[2] - along * ax[2])
        u_len = math.sqrt(_dot(u_raw, u_raw))
        u = (u_raw[0] / u_len, u_raw[1] / u_len, u_raw[2] / u_len)
        v = _cross(ax, u)

        dp = _sub(point, self.base_centre)
        z = _dot(dp, ax)
        total_height = self.pitch * self.turns
        if z < -self.wire_radius or z > total_height + self.wire_radius:
            return False

        pu = _dot(dp, u)
        pv = _dot(dp, v)

        # Scan the centreline within one turn of the axial estimate.
        t_max = _TAU * self.turns
        t_guess = z * _TAU / self.pitch if self.pitch > _AXIS_EPS else 0.0
        t_guess = min(max(t_guess, 0.0), t_max)
        t_lo = max(t_guess - _TAU, 0.0)
        t_hi = min(t_guess + _TAU, t_max)

        def dist_sq(t: float) -> float:
            dz = z - t * self.pitch / _TAU
            du = pu - self.radius * math.cos(t)
            dv = pv - self.radius * math.sin(t)
            return dz * dz + du * du + dv * dv

        nearest = min(
            dist_sq(t_lo + (t_hi - t_lo) * i / _HELIX_SAMPLES)
            for i in range(_HELIX_SAMPLES + 1)
        )
        return nearest <= self.wire_radius * self.wire_radius

    def bounding_box(self) -> tuple[Vec3, Vec3]:
        ax = _unit(self.axis) or (0.0, 0.0, 1.0)
        return _axial_box(
            self.base_centre,
            ax,
            self.pitch * self.turns,
            self.radius + self.wire_radius,
            self.wire_radius,
        )


@dataclass(frozen=True)
class Ellipsoid(Primitive):
    """An axis-aligned ellipsoid given by centre and semi-axis lengths."""

    centre: Vec3
    semi_axes: Vec3

    def __post_init__(self) -> None:
        object.__setattr__(self, "centre", _vec3(self.centre))
        object.__setattr__(self, "semi_axes", _vec3(self.semi_axes))

    def contains(self, point: Sequence[float]) -> bool:
        return (
            sum(
                ((p - c) / s) ** 2
                for p, c, s in zip(point, self.centre, self.semi_axes)
            )
            <= 1.0
        )

    def bounding_box(self) -> tuple[Vec3, Vec3]:
        return (
            _vec3(c - s for c, s in zip(self.centre, self.semi_axes)),
            _vec3(c + s for c, s in zip(self.centre, self.semi_axes)),
        )


_SHAPES: dict[str, type[Primitive]] = {
    cls.__name__: cls for cls in (Sphere, Cylinder, Cuboid, Helix, Ellipsoid)
}


def primitive_from_dict(data: Mapping[str, Any]) -> Primitive:
    """Build a primitive from a mapping tagged with its ``type``."""
    try:
        tag = data["type"]
    except KeyError:
        raise ValueError("missing field `type`") from None
    shape = _SHAPES.get(tag)
    if shape is None:
        expected = ", ".join(_SHAPES)
        raise ValueError(f"unknown variant `{tag}`, expected one of {expected}")
    kwargs = {}
    for f in fields(shape):  # type: ignore[arg-type]
        if f.name not in data:
            raise ValueError(f"missing field `{f.name}`")
        kwargs[f.name] = data[f.name]
    return shape(**kwargs)