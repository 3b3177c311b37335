[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "straightskel"
version = "0.1.0"
description = "Building blocks for straight-skeleton computation: 3D geometry, ordered containers and output face bookkeeping."
requires-python = ">=3.10"
dependencies = []
keywords = ["straight skeleton", "geometry", "computational geometry", "polygon"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
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

[tool.hatch.build.targets.wheel]
packages = ["straightskel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
