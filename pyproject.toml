[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polymesh"
version = "1.0.0"
description = "Read a polygonal mesh from CSV files, check its geometry and export it in UCD format for ParaView."
requires-python = ">=3.10"
dependencies = []
keywords = ["mesh", "polygonal mesh", "ucd", "paraview", "geometry", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
polymesh = "polymesh.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["polymesh"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
