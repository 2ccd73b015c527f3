[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tourmap"
version = "0.2.0"
description = "Tourist maps with junctions, named spots, roads and shortest-route lookup"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["map", "tourist", "route", "shortest-path", "dijkstra", "gis"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tourmap = "tourmap.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tourmap"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
