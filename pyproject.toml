[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oikit"
version = "0.1.0"
description = "Helpers for algorithm practice: string search, number theory, bit tricks, counting, heaps, small containers, a character canvas and console utilities"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "kmp",
    "sieve",
    "heap",
    "radix-sort",
    "roman-numerals",
    "ascii-art",
    "competitive-programming",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oikit-canvas = "oikit.canvas:main"

[tool.hatch.build.targets.wheel]
packages = ["oikit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
