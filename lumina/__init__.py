"""Geometry, dipole lattice discretisation and optical material data for coupled-dipole simulations."""

__version__ = "0.1.0"