"""Parametric shapes, .xyz and .obj parsers, affine transforms and dipole lattice discretisation."""