import pytest

from lumina.materials.palik import PalikMaterial
from lumina.materials.provider import OutOfRangeError


def test_names():
    assert PalikMaterial.tio2().name() == "TiO₂ (Palik)"
    assert PalikMaterial.sio2().name() == "SiO₂ (Palik)"


def test_wavelength_range():
    for material in (PalikMaterial.tio2(), PalikMaterial.sio2()):
        assert material.wavelength_range() == (300.0, 1000.0)


@pytest.mark.parametrize("wl", [299.0, 1000.5])
def test_out_of_range(wl):
    for material in (PalikMaterial.tio2(), PalikMaterial.sio2()):
        with pytest.raises(OutOfRangeError):
            material.dielectric_function(wl)


def test_range_endpoints_accepted():
    for material in (PalikMaterial.tio2(), PalikMaterial.sio2()):
        assert material.dielectric_function(300.0).real > 1.0
        assert material.dielectric_function(1000.0).real > 1.0


@pytest.mark.parametrize(
    "wl, n, k", [(300.0, 3.340, 0.880), (380.0, 2.640, 0.018), (500.0, 2.572, 0.0)]
)
def test_tio2_table_values(wl, n, k):
    assert PalikMaterial.tio2().refractive_index(wl) == pytest.approx(complex(n, k), abs=1e-9)


@pytest.mark.parametrize("wl, n", [(300.0, 1.487), (600.0, 1.458), (1000.0, 1.448)])
def test_sio2_table_values(wl, n):
    assert PalikMaterial.sio2().refractive_index(wl).real == pytest.approx(n, abs=1e-9)


def test_tio2_index_higher_than_sio2_across_range():
    tio2 = PalikMaterial.tio2()
    sio2 = PalikMaterial.sio2()
    for wl in range(300, 1001, 25):
        assert tio2.refractive_index(wl).real > sio2.refractive_index(wl).real


def test_tio2_interpolated_between_neighbours():
    n = PalikMaterial.tio2().refractive_index(610.0).real
    assert 2.543 <= n <= 2.547


def test_sio2_lossless_in_visible():
    sio2 = PalikMaterial.sio2()
    for wl in (450.0, 550.0, 650.0):
        assert abs(sio2.dielectric_function(wl).imag) < 1e-9


def test_tio2_absorption_near_uv_exceeds_visible():
    tio2 = PalikMaterial.tio2()
    assert tio2.dielectric_function(320.0).imag > tio2.dielectric_function(600.0).imag