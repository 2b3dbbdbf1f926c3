[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "distinctgrid"
version = "0.1.0"
description = "Find the largest submatrix whose elements are all distinct, with a constant-time resettable integer map."
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "submatrix", "distinct", "dynamic-programming", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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

[project.scripts]
distinctgrid = "distinctgrid.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["distinctgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
