"""Parsers for molecular (.xyz) and mesh (.obj) geometry files."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

Vec3 = tuple[float, float, float]
Face = tuple[int, int, int]

ANGSTROM_TO_NM = 0.1


class ParseError(Exception):
    """Base class for geometry file parsing errors."""


class ParseFormatError(ParseError):
    """The content does not follow the expected file format."""

    def __init__(self, line: int, message: str) -> None:
        self.line = line
        self.message = message
        super().__init__(f"Parse error at line {line}: {message}")


class UnsupportedFormatError(ParseError):
    """The file format is not supported."""

    def __init__(self, fmt: str) -> None:
        self.format = fmt
        super().__init__(f"Unsupported file format: {fmt}")


@dataclass(frozen=True)
class ParsedPoint:
    """A parsed atomic or vertex position with an optional label."""

    position: Vec3
    label: Optional[str] = None


@dataclass
class ObjMesh:
    """A triangle mesh: vertex positions (nm) and 0-based triangle indices."""

    vertices: list[Vec3] = field(default_factory=list)
    faces: list[Face] = field(default_factory=list)

    def bounding_box(self) -> tuple[Vec3, Vec3]:
        """Axis-aligned bounding box as ``(min_corner, max_corner)``."""
        if not self.vertices:
            inf = float("inf")
            return (inf, inf, inf), (-inf, -inf, -inf)
        xs, ys, zs = zip(*self.vertices)
        return (min(xs), min(ys), min(zs)), (max(xs), max(ys), max(zs))


def _parse_float(token: str) -> float:
    if not token.isascii() or "_" in token:
        raise ValueError(token)
    return float(token)


def _parse_unsigned(token: str) -> int:
    digits = token[1:] if token.startswith("+") else token
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError(token)
    return int(digits)


def _coordinates(tokens: list[str], line: int) -> Vec3:
    values = []
    for axis, token in zip("xyz", tokens):
        try:
            values.append(_parse_float(token))
        except ValueError:
            raise ParseFormatError(line, f"Invalid {axis} coordinate: {token}") from None
    x, y, z = values
    return (x, y, z)


def parse_xyz(content: str) -> list[ParsedPoint]:
    """Parse XYZ content; coordinates are converted from angstroms to nm."""
    lines = content.splitlines()
    if len(lines) < 3:
        raise ParseFormatError(1, "XYZ file must have at least 3 lines")

    try:
        num_atoms = _parse_unsigned(lines[0].strip())
    except ValueError:
        raise ParseFormatError(1, "First line must be the number of atoms") from None

    points: list[ParsedPoint] = []
    for line_no, raw in enumerate(lines[2:], start=3):
        text = raw.strip()
        if not text:
            continue
        parts = text.split()
        if len(parts) < 4:
            raise ParseFormatError(line_no, f"Expected 'element x y z', got '{text}'")
        x, y, z = _coordinates(parts[1:4], line_no)
        points.append(
            ParsedPoint(
                position=(x * ANGSTROM_TO_NM, y * ANGSTROM_TO_NM, z * ANGSTROM_TO_NM),
                label=parts[0],
            )
        )

    if len(points) != num_atoms:
        raise ParseFormatError(1, f"Header says {num_atoms} atoms but found {len(points)}")
    return points


def _face_indices(tokens: list[str], line: int) -> list[int]:
    indices = []
    for position, token in enumerate(tokens, start=1):
        try:
            index = _parse_unsigned(token.split("/")[0])
        except ValueError:
            raise ParseFormatError(
                line, f"Invalid face index at position {position}: {token}"
            ) from None
        if index == 0:
            raise ParseFormatError(line, "Face index 0 is invalid (OBJ indices are 1-based)")
        indices.append(index - 1)
    return indices


def parse_obj(content: str) -> ObjMesh:
    """Parse Wavefront OBJ content into a triangle mesh.

    Faces are fan-triangulated from their first vertex; only the vertex index
    of ``v/vt/vn`` references is kept. Other statements are ignored.
    """
    vertices: list[Vec3] = []
    faces: list[Face] = []

    for line_no, raw in enumerate(content.splitlines(), start=1):
        text = raw.strip()
        if not text or text.startswith("#"):
            continue
        keyword, *rest = text.split()
        if keyword == "v":
            if len(rest) < 3:
                raise ParseFormatError(
                    line_no, f"Vertex needs at least 3 coordinates, got {len(rest)}"
                )
            vertices.append(_coordinates(rest[:3], line_no))
        elif keyword == "f":
            indices = _face_indices(rest, line_no)
            if len(indices) < 3:
                raise ParseFormatError(
                    line_no, f"Face needs at least 3 vertices, got {len(indices)}"
                )
            first = indices[0]
            faces.extend((first, b, c) for b, c in zip(indices[1:], indices[2:]))

    if len(vertices) < 4:
        raise ParseFormatError(
            0,
            "Mesh needs at least 4 vertices to form a closed volume, "
            f"got {len(vertices)}",
        )
    if not faces:
        raise ParseFormatError(0, "No faces found in OBJ file")

    count = len(vertices)
    for face_no, face in enumerate(faces, start=1):
        for index in face:
            if index >= count:
                raise ParseFormatError(
                    0,
                    f"Face {face_no} references vertex index {index + 1} "
                    f"but only {count} vertices exist",
                )

    return ObjMesh(vertices=vertices, faces=faces)