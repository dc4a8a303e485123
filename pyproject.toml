[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rnastruct"
version = "0.1.0"
description = "RNA secondary structure modelling: parse dot-bracket notation into motifs, poses and helices, and check sequence constraints."
requires-python = ">=3.10"
dependencies = []
keywords = ["rna", "secondary-structure", "dot-bracket", "motif", "bioinformatics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rnastruct"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
