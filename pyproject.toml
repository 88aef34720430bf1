[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "geoservice"
version = "0.1.0"
description = "Thread-safe planar geometry operations over WKT and GeoJSON input"
requires-python = ">=3.10"
dependencies = [
    "shapely>=2.0",
]
keywords = ["gis", "geometry", "wkt", "geojson", "spatial", "buffer", "union"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
geoservice-basic = "geoservice.basic_usage:main"
geoservice-advanced = "geoservice.advanced_operations:main"

[tool.hatch.build.targets.wheel]
packages = ["geoservice"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
