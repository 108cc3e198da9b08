# lumina

Building blocks for coupled-dipole optical simulations of nanoparticles:

- **Materials** (`lumina.materials`): tabulated complex dielectric functions
  for gold, silver and copper (Johnson & Christy) and for TiO₂ and SiO₂
  (Palik), interpolated with natural cubic splines.
- **Geometry** (`lumina.geometry`): parametric shapes (sphere, cylinder,
  cuboid, ellipsoid, helix), `.xyz` and `.obj` file parsers, affine
  transforms, and discretisation of shapes and closed meshes into cubic
  dipole lattices.

All lengths are in nanometres. `.xyz` coordinates are read in ångströms and
converted to nanometres. The package has no dependencies outside the
standard library.

## Installation

```
pip install .
```

Install the test extra and run the suite with:

```
pip install .[test]
pytest
```

## Materials

Every material is a `MaterialProvider` with `name()`, `wavelength_range()`,
`dielectric_function(wavelength_nm)` and `refractive_index(wavelength_nm)`
(the principal square root of ε).

```python
from lumina.materials.johnson_christy import JohnsonChristyMaterial
from lumina.materials.palik import PalikMaterial
from lumina.materials.provider import OutOfRangeError

gold = JohnsonChristyMaterial.gold()
print(gold.name())                     # "Au (Johnson & Christy)"
low, high = gold.wavelength_range()    # about 188 to 892 nm
eps = gold.dielectric_function(520.0)  # complex ε = ε₁ + iε₂
n = gold.refractive_index(520.0)       # complex n + ik

try:
    PalikMaterial.tio2().dielectric_function(1200.0)
except OutOfRangeError as err:
    print(err.wavelength_nm, err.min_nm, err.max_nm)
```

Available datasets:

| Constructor | Material | Range |
|-------------|----------|-------|
| `JohnsonChristyMaterial.gold()` | Au | ~188–892 nm |
| `JohnsonChristyMaterial.silver()` | Ag | ~188–892 nm |
| `JohnsonChristyMaterial.copper()` | Cu | ~188–892 nm |
| `PalikMaterial.tio2()` | rutile TiO₂ (ordinary ray) | 300–1000 nm |
| `PalikMaterial.sio2()` | fused silica | 300–1000 nm |

Wavelengths outside a table's range raise `OutOfRangeError`, a subclass of
`MaterialError`.

Your own data can be wrapped with `TabulatedMaterial`, either from
wavelength, ε₁ and ε₂ columns, or from `(wavelength, n, k)` rows with
`TabulatedMaterial.from_nk(name, table, wavelength_scale)`, where the
wavelengths are multiplied by `wavelength_scale` to give nanometres.
Malformed tables (unequal lengths, fewer than two points, wavelengths not
strictly increasing) raise `MaterialDataError`.

The interpolator is available on its own; outside the knots it extrapolates
with the end polynomial:

```python
from lumina.materials.spline import CubicSpline

spline = CubicSpline([1.0, 2.0, 3.0], [2.0, 3.0, 5.0])
spline(2.5)            # same as spline.evaluate(2.5)
```

## Geometry

### Shapes

`Sphere`, `Cylinder`, `Cuboid`, `Ellipsoid` and `Helix` in
`lumina.geometry.primitives` are frozen dataclasses with `contains(point)`
and `bounding_box()`.

```python
from lumina.geometry.primitives import Sphere, Helix, primitive_from_dict
from lumina.geometry.discretise import discretise_primitive

sphere = Sphere(centre=(0.0, 0.0, 0.0), radius=10.0)
lattice = discretise_primitive(sphere, 2.0)
positions = [p.position for p in lattice]

helix = Helix(base_centre=(0, 0, -30), axis=(0, 0, 1),
              radius=15.0, pitch=20.0, turns=3.0, wire_radius=4.0)
data = helix.to_dict()                 # {"type": "Helix", "base_centre": [...], ...}
same = primitive_from_dict(data)
```

`primitive_from_dict` raises `ValueError` for a missing `type`, an unknown
shape or a missing field.

The lattice is centred on the midpoint of the shape's bounding box, so it is
symmetric about the shape's centre. A spacing that is not positive raises
`ValueError`.

### Files

```python
from lumina.geometry.parsers import parse_obj, parse_xyz
from lumina.geometry.discretise import discretise_mesh

with open("particle.obj", encoding="utf-8") as fh:
    mesh = parse_obj(fh.read())
lattice = discretise_mesh(mesh, 1.5)
```

`parse_obj` reads `v` and `f` statements, keeps the vertex index of
`v/vt/vn` references, fan-triangulates polygons and ignores everything else.
It returns an `ObjMesh` with `vertices`, 0-based triangle `faces` and
`bounding_box()`. Points are tested for being inside the mesh by counting
ray crossings along +z (`mesh_contains`, `ray_triangle_z`), so the mesh
should be closed.

`parse_xyz` returns `ParsedPoint` objects carrying a position in nm and the
element label. Malformed input of either format raises `ParseFormatError`
(a `ParseError`), which carries the offending `line` and `message`; errors
found only after reading the whole mesh report line 0.

### Transforms

```python
from lumina.geometry.transform import Transform

t = Transform.uniform_scale(2.0).then(Transform.from_translation(1.0, 0.0, 0.0))
t.apply((1.0, 1.0, 1.0))  # (3.0, 2.0, 2.0)
```

`Transform.identity()` and `Transform.scale(sx, sy, sz)` are also provided;
`a.then(b)` applies `a` first and `b` second.

## What it does not do

This package prepares inputs for a coupled-dipole calculation; it does not
perform one. It has no solver for dipole moments, computes no extinction,
absorption or scattering cross-sections, near fields or far-field patterns,
and has no Mie-theory reference. It has no graphical interface and no
command-line program. Crystallographic `.cif` files are not read.