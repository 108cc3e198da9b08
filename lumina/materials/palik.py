"""Palik handbook optical constants for substrates and oxides."""

from __future__ import annotations

from lumina.materials.provider import TabulatedMaterial

# Sampling grid in nm: 10 nm steps below 400 nm, 20 nm steps from 400 to 1000 nm.
_WAVELENGTHS_NM = tuple(float(wl) for wl in range(300, 400, 10)) + tuple(
    float(wl) for wl in range(400, 1001, 20)
)

# Rutile TiO2, ordinary ray.
_TIO2_N = (
    3.34, 3.14, 2.99, 2.87, 2.78, 2.72, 2.68, 2.655, 2.64, 2.629,
    2.62, 2.607, 2.596, 2.587, 2.579, 2.572, 2.566, 2.56, 2.555, 2.551,
    2.547, 2.543, 2.54, 2.537, 2.534, 2.531, 2.529, 2.527, 2.525, 2.523,
    2.521, 2.519, 2.518, 2.516, 2.515, 2.513, 2.512, 2.511, 2.51, 2.508,
    2.507,
)
_TIO2_K = (
    0.88, 0.66, 0.48, 0.33, 0.22, 0.14, 0.08, 0.04, 0.018, 0.008, 0.003, 0.001,
) + (0.0,) * 29

# Fused silica; lossless over the whole grid.
_SIO2_N = (
    1.487, 1.484, 1.482, 1.48, 1.478, 1.476, 1.475, 1.474, 1.473, 1.472,
    1.47, 1.469, 1.468, 1.467, 1.466, 1.462, 1.461, 1.46, 1.459, 1.458,
    1.458, 1.457, 1.457, 1.456, 1.455, 1.455, 1.454, 1.454, 1.453, 1.453,
    1.452, 1.452, 1.451, 1.451, 1.45, 1.45, 1.45, 1.449, 1.449, 1.449,
    1.448,
)
_SIO2_K = (0.0,) * len(_SIO2_N)


def _table(n_values, k_values):
    return tuple(zip(_WAVELENGTHS_NM, n_values, k_values, strict=True))


class PalikMaterial(TabulatedMaterial):
    """Palik handbook material with a spline-interpolated dielectric function."""

    @classmethod
    def tio2(cls) -> "PalikMaterial":
        """Rutile TiO2 (ordinary ray), 300–1000 nm."""
        return cls.from_nk("TiO₂ (Palik)", _table(_TIO2_N, _TIO2_K))

    @classmethod
    def sio2(cls) -> "PalikMaterial":
        """Fused silica SiO2, 300–1000 nm."""
        return cls.from_nk("SiO₂ (Palik)", _table(_SIO2_N, _SIO2_K))