"""Johnson & Christy tabulated dielectric functions for Au, Ag and Cu."""

from __future__ import annotations

from lumina.materials.provider import TabulatedMaterial

_MICRON_TO_NM = 1000.0

# Photon-energy grid shared by all three metals, as wavelengths in micrometres.
_WAVELENGTHS_UM = (
    0.1879, 0.1916, 0.1953, 0.1993, 0.2033, 0.2073, 0.2119, 0.2164, 0.2214, 0.2262,
    0.2313, 0.2371, 0.2426, 0.2490, 0.2551, 0.2616, 0.2689, 0.2761, 0.2844, 0.2924,
    0.3009, 0.3107, 0.3204, 0.3315, 0.3425, 0.3542, 0.3679, 0.3815, 0.3974, 0.4133,
    0.4305, 0.4509, 0.4714, 0.4959, 0.5209, 0.5486, 0.5821, 0.6168, 0.6595, 0.7045,
    0.7560, 0.8211, 0.8920,
)

_GOLD_N = (
    1.28, 1.32, 1.34, 1.33, 1.33, 1.30, 1.30, 1.30, 1.30, 1.31,
    1.30, 1.32, 1.32, 1.33, 1.33, 1.35, 1.38, 1.43, 1.47, 1.49,
    1.53, 1.53, 1.54, 1.48, 1.48, 1.50, 1.48, 1.46, 1.47, 1.46,
    1.45, 1.38, 1.31, 1.04, 0.62, 0.43, 0.29, 0.21, 0.14, 0.13,
    0.14, 0.16, 0.17,
)
_GOLD_K = (
    1.188, 1.203, 1.226, 1.251, 1.277, 1.304, 1.350, 1.387, 1.427, 1.460,
    1.497, 1.536, 1.577, 1.631, 1.688, 1.749, 1.803, 1.847, 1.869, 1.878,
    1.889, 1.893, 1.898, 1.883, 1.871, 1.866, 1.895, 1.933, 1.952, 1.958,
    1.948, 1.914, 1.849, 1.833, 2.081, 2.455, 2.863, 3.272, 3.697, 4.103,
    4.542, 5.083, 5.663,
)

# UV values (below ~300 nm) are approximate.
_SILVER_N = (
    1.07, 1.10, 1.12, 1.14, 1.15, 1.18, 1.20, 1.22, 1.27, 1.31,
    1.33, 1.38, 1.45, 1.57, 1.73, 1.93, 2.21, 2.54, 2.80, 2.38,
    1.88, 1.44, 0.88, 0.35, 0.24, 0.20, 0.18, 0.16, 0.145, 0.145,
    0.138, 0.134, 0.130, 0.126, 0.120, 0.114, 0.107, 0.100, 0.093, 0.086,
    0.080, 0.074, 0.066,
)
_SILVER_K = (
    1.212, 1.232, 1.255, 1.274, 1.296, 1.312, 1.326, 1.342, 1.367, 1.389,
    1.414, 1.431, 1.439, 1.432, 1.416, 1.419, 1.468, 1.569, 1.650, 1.340,
    0.980, 0.680, 0.580, 0.960, 1.620, 2.070, 2.440, 2.820, 2.950, 2.844,
    3.042, 3.206, 3.380, 3.567, 3.765, 3.977, 4.210, 4.458, 4.758, 5.067,
    5.435, 5.882, 6.372,
)

# Cu has a d-band interband transition near 590 nm; UV values are approximate.
_COPPER_N = (
    1.07, 1.08, 1.10, 1.12, 1.14, 1.16, 1.18, 1.22, 1.26, 1.30,
    1.34, 1.40, 1.47, 1.56, 1.68, 1.85, 2.05, 2.30, 2.58, 2.80,
    2.95, 3.05, 3.08, 3.04, 2.98, 2.88, 2.74, 2.58, 2.40, 2.18,
    1.95, 1.71, 1.45, 1.20, 0.97, 0.77, 0.40, 0.22, 0.14, 0.13,
    0.13, 0.14, 0.15,
)
_COPPER_K = (
    1.210, 1.228, 1.248, 1.270, 1.292, 1.315, 1.340, 1.362, 1.389, 1.412,
    1.436, 1.457, 1.472, 1.475, 1.480, 1.490, 1.520, 1.584, 1.690, 1.820,
    1.960, 2.100, 2.200, 2.310, 2.420, 2.520, 2.620, 2.710, 2.800, 2.890,
    2.950, 2.990, 2.990, 2.940, 2.870, 2.780, 2.980, 3.700, 4.103, 4.579,
    5.058, 5.651, 6.298,
)


def _table(n_values, k_values):
    return tuple(zip(_WAVELENGTHS_UM, n_values, k_values, strict=True))


class JohnsonChristyMaterial(TabulatedMaterial):
    """Johnson & Christy noble-metal data with a spline-interpolated dielectric function."""

    @classmethod
    def gold(cls) -> "JohnsonChristyMaterial":
        """Gold (Au), 188–892 nm."""
        return cls.from_nk("Au (Johnson & Christy)", _table(_GOLD_N, _GOLD_K), _MICRON_TO_NM)

    @classmethod
    def silver(cls) -> "JohnsonChristyMaterial":
        """Silver (Ag), 188–892 nm."""
        return cls.from_nk(
            "Ag (Johnson & Christy)", _table(_SILVER_N, _SILVER_K), _MICRON_TO_NM
        )

    @classmethod
    def copper(cls) -> "JohnsonChristyMaterial":
        """Copper (Cu), 188–892 nm."""
        return cls.from_nk(
            "Cu (Johnson & Christy)", _table(_COPPER_N, _COPPER_K), _MICRON_TO_NM
        )