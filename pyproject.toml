[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numsys"
version = "0.1.0"
description = "Interactive terminal trainer for number systems: conversion quiz, two's complement arithmetic, step-by-step base conversion and bitwise operations"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary", "hexadecimal", "octal", "twos-complement", "bitwise", "education", "quiz"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numsys = "numsys.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["numsys"]

[tool.pytest.ini_options]
addopts = "-ra"
