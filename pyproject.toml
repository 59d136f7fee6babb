[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vdjseq"
version = "0.1.0"
description = "Nucleotide and amino-acid sequence types with degenerate-base handling, plus distribution normalisation helpers"
requires-python = ">=3.10"
keywords = ["dna", "amino-acid", "codon", "degenerate nucleotides", "iupac", "vdj"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["vdjseq"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
