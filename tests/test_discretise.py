import pytest

from lumina.geometry.discretise import (
    LatticePoint,
    discretise_mesh,
    discretise_primitive,
    mesh_contains,
    ray_triangle_z,
)
from lumina.geometry.parsers import parse_obj
from lumina.geometry.primitives import Cuboid, Sphere


def cube_obj(h: float) -> str:
    """A closed cube spanning +-h on each axis, as six quad faces."""
    return (
        f"v {h} {h} -{h}\nv {h} -{h} -{h}\nv -{h} -{h} -{h}\nv -{h} {h} -{h}\n"
        f"v {h} {h} {h}\nv {h} -{h} {h}\nv -{h} -{h} {h}\nv -{h} {h} {h}\n"
        "f 1 2 3 4\nf 5 8 7 6\nf 1 5 6 2\nf 3 7 8 4\nf 1 4 8 5\nf 2 6 7 3\n"
    )


def test_sphere_discretisation_count():
    sphere = Sphere(centre=(0.0, 0.0, 0.0), radius=10.0)
    points = discretise_primitive(sphere, 2.0)
    assert 300 < len(points) < 800


def test_all_points_inside_sphere():
    sphere = Sphere(centre=(5.0, 5.0, 5.0), radius=8.0)
    points = discretise_primitive(sphere, 1.5)
    assert points
    for p in points:
        dx, dy, dz = (c - 5.0 for c in p.position)
        assert dx * dx + dy * dy + dz * dz <= 64.0 + 1e-10


def test_cuboid_grid_is_centred_and_counted():
    cuboid = Cuboid(centre=(0.0, 0.0, 0.0), half_extents=(5.0, 5.0, 5.0))
    points = discretise_primitive(cuboid, 2.0)
    assert len(points) == 125
    xs = sorted({p.position[0] for p in points})
    assert xs == pytest.approx([-4.0, -2.0, 0.0, 2.0, 4.0])


def test_lattice_order_z_fastest():
    cuboid = Cuboid(centre=(0.0, 0.0, 0.0), half_extents=(1.0, 1.0, 1.0))
    points = discretise_primitive(cuboid, 1.0)
    assert points[0] == LatticePoint((-1.0, -1.0, -1.0))
    assert points[1] == LatticePoint((-1.0, -1.0, 0.0))
    assert points[-1] == LatticePoint((1.0, 1.0, 1.0))


@pytest.mark.parametrize("spacing", [0.0, -1.0])
def test_nonpositive_spacing_rejected(spacing):
    sphere = Sphere(centre=(0.0, 0.0, 0.0), radius=1.0)
    with pytest.raises(ValueError):
        discretise_primitive(sphere, spacing)
    mesh = parse_obj(cube_obj(5.0))
    with pytest.raises(ValueError):
        discretise_mesh(mesh, spacing)


def test_ray_triangle_z_hit():
    t = ray_triangle_z((1.0, 1.0, 0.0), (0.0, 0.0, 5.0), (10.0, 0.0, 5.0), (0.0, 10.0, 5.0))
    assert t is not None
    assert t == pytest.approx(5.0, abs=1e-10)


def test_ray_triangle_z_miss():
    t = ray_triangle_z((20.0, 20.0, 0.0), (0.0, 0.0, 5.0), (10.0, 0.0, 5.0), (0.0, 10.0, 5.0))
    assert t is None


def test_ray_triangle_z_behind():
    t = ray_triangle_z((1.0, 1.0, 0.0), (0.0, 0.0, -5.0), (10.0, 0.0, -5.0), (0.0, 10.0, -5.0))
    assert t is None


def test_ray_triangle_z_parallel():
    t = ray_triangle_z((1.0, 1.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0, 10.0), (0.0, 10.0, 0.0))
    assert t is None


def test_mesh_contains_cube():
    mesh = parse_obj(cube_obj(5.0))
    inside = [(0.0, 0.0, 0.0), (3.0, 3.0, 3.0), (-4.0, -4.0, -4.0)]
    outside = [(6.0, 0.0, 0.0), (0.0, 6.0, 0.0), (0.0, 0.0, 6.0), (10.0, 10.0, 10.0)]
    for p in inside:
        assert mesh_contains(mesh.vertices, mesh.faces, p)
    for p in outside:
        assert not mesh_contains(mesh.vertices, mesh.faces, p)


def test_discretise_cube_mesh():
    mesh = parse_obj(cube_obj(5.0))
    points = discretise_mesh(mesh, 2.0)
    assert 100 <= len(points) <= 800
    assert len(points) == 125
    for p in points:
        assert all(abs(c) <= 5.0 + 1e-10 for c in p.position)