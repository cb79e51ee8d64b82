[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "compactmeta"
version = "0.1.0"
description = "Succinct data structures, FASTA/FASTQ reading and taxonomic abundance estimation for metagenomic read classification"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bioinformatics",
    "metagenomics",
    "succinct data structures",
    "bitvector",
    "rank select",
    "elias gamma",
    "LOUDS",
    "range min-max tree",
    "FASTA",
    "FASTQ",
    "abundance estimation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["compactmeta"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
