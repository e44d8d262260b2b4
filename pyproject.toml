[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seqlab"
version = "0.1.0"
description = "Sequence alignment, genome assembly, metagenomic diversity and small computational-biology utilities."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bioinformatics",
    "sequence alignment",
    "genome assembly",
    "overlap graph",
    "metagenomics",
    "diversity",
    "k-mer",
    "cellular automata",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
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

[project.scripts]
seqlab-align = "seqlab.align_cli:main"
seqlab-assemble = "seqlab.assembly_cli:main"
seqlab-metagenomics = "seqlab.metagenomics_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["seqlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
