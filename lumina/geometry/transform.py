"""Affine transformations: scale, translate and composition."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

Vec3 = tuple[float, float, float]
Mat3 = tuple[Vec3, Vec3, Vec3]

_IDENTITY: Mat3 = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))
_ZERO: Vec3 = (0.0, 0.0, 0.0)


def _mat_vec(matrix: Mat3, vector: Sequence[float]) -> Vec3:
    x, y, z = (sum(m * v for m, v in zip(row, vector)) for row in matrix)
    return (x, y, z)


def _mat_mul(left: Mat3, right: Mat3) -> Mat3:
    columns = tuple(zip(*right))
    r0, r1, r2 = (
        tuple(sum(a * b for a, b in zip(row, col)) for col in columns)
        for row in left
    )
    return (r0, r1, r2)  # type: ignore[return-value]


@dataclass(frozen=True)
class Transform:
    """An affine map ``p -> matrix @ p + translation`` (lengths in nm)."""

    matrix: Mat3 = _IDENTITY
    translation: Vec3 = _ZERO

    @classmethod
    def identity(cls) -> "Transform":
        """The identity transformation."""
        return cls()

    @classmethod
    def from_translation(cls, dx: float, dy: float, dz: float) -> "Transform":
        """A pure translation."""
        return cls(translation=(float(dx), float(dy), float(dz)))

    @classmethod
    def uniform_scale(cls, factor: float) -> "Transform":
        """A uniform scale about the origin."""
        return cls.scale(factor, factor, factor)

    @classmethod
    def scale(cls, sx: float, sy: float, sz: float) -> "Transform":
        """A non-uniform scale about the origin."""
        return cls(
            matrix=(
                (float(sx), 0.0, 0.0),
                (0.0, float(sy), 0.0),
                (0.0, 0.0, float(sz)),
            )
        )

    def apply(self, point: Sequence[float]) -> Vec3:
        """Transform a 3D point."""
        x, y, z = _mat_vec(self.matrix, point)
        tx, ty, tz = self.translation
        return (x + tx, y + ty, z + tz)

    def then(self, other: "Transform") -> "Transform":
        """The transform that applies ``self`` first and ``other`` second."""
        moved = _mat_vec(other.matrix, self.translation)
        return Transform(
            matrix=_mat_mul(other.matrix, self.matrix),
            translation=tuple(m + t for m, t in zip(moved, other.translation)),  # type: ignore[arg-type]
        )