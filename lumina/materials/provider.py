"""Material providers giving wavelength-dependent dielectric functions."""

from __future__ import annotations

import cmath
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

from lumina.materials.spline import CubicSpline


def _fmt(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


class MaterialError(Exception):
    """Base class for material provider errors."""


class OutOfRangeError(MaterialError):
    """A wavelength lies outside the tabulated data range."""

    def __init__(self, wavelength_nm: float, min_nm: float, max_nm: float) -> None:
        self.wavelength_nm = wavelength_nm
        self.min_nm = min_nm
        self.max_nm = max_nm
        super().__init__(
            f"Wavelength {_fmt(wavelength_nm)} nm is outside the data range "
            f"[{_fmt(min_nm)}, {_fmt(max_nm)}] nm"
        )


class MaterialNotFoundError(MaterialError):
    """A requested material is not known."""

    def __init__(self, name: str) -> None:
        self.material = name
        super().__init__(f"Material not found: {name}")


class MaterialDataError(MaterialError):
    """Material data is malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Data error: {message}")


class MaterialProvider(ABC):
    """Provides frequency-dependent material properties."""

    @abstractmethod
    def name(self) -> str:
        """Human-readable name of the material."""

    @abstractmethod
    def wavelength_range(self) -> tuple[float, float]:
        """Wavelength range (nm) over which data is available."""

    @abstractmethod
    def dielectric_function(self, wavelength_nm: float) -> complex:
        """Complex dielectric function at the given wavelength (nm)."""

    def refractive_index(self, wavelength_nm: float) -> complex:
        """Complex refractive index n + ik, the principal square root of epsilon."""
        return cmath.sqrt(self.dielectric_function(wavelength_nm))


class TabulatedMaterial(MaterialProvider):
    """A material whose dielectric function is spline-interpolated from a table."""

    def __init__(
        self,
        name: str,
        wavelengths_nm: Sequence[float],
        eps_real: Sequence[float],
        eps_imag: Sequence[float],
    ) -> None:
        wavelengths = tuple(float(w) for w in wavelengths_nm)
        try:
            self._spline_real = CubicSpline(wavelengths, eps_real)
            self._spline_imag = CubicSpline(wavelengths, eps_imag)
        except ValueError as exc:
            raise MaterialDataError(str(exc)) from exc
        self._name = str(name)
        self._wavelengths_nm = wavelengths

    @classmethod
    def from_nk(
        cls,
        name: str,
        table: Iterable[tuple[float, float, float]],
        wavelength_scale: float = 1.0,
    ) -> "TabulatedMaterial":
        """Build from ``(wavelength, n, k)`` rows; wavelengths are multiplied by
        ``wavelength_scale`` to give nanometres."""
        rows = list(table)
        return cls(
            name,
            [wl * wavelength_scale for wl, _, _ in rows],
            [n * n - k * k for _, n, k in rows],
            [2.0 * n * k for _, n, k in rows],
        )

    def name(self) -> str:
        return self._name

    def wavelength_range(self) -> tuple[float, float]:
        return self._wavelengths_nm[0], self._wavelengths_nm[-1]

    def dielectric_function(self, wavelength_nm: float) -> complex:
        low, high = self.wavelength_range()
        if wavelength_nm < low or wavelength_nm > high:
            raise OutOfRangeError(wavelength_nm, low, high)
        return complex(
            self._spline_real.evaluate(wavelength_nm),
            self._spline_imag.evaluate(wavelength_nm),
        )