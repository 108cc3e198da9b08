[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lumina"
version = "0.1.0"
description = "Geometry primitives, dipole lattice discretisation and tabulated optical material data for coupled-dipole nanophotonics"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "nanophotonics",
    "plasmonics",
    "discrete dipole approximation",
    "dielectric function",
    "optical constants",
    "cubic spline",
    "mesh",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lumina"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
