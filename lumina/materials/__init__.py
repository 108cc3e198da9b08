"""Tabulated, spline-interpolated complex dielectric functions of metals and oxides."""