[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heroswap"
version = "0.1.0"
description = "A two-stack sorting puzzle solver and a text-mode tile treasure hunt with map validation"
requires-python = ">=3.10"
dependencies = []
keywords = ["push-swap", "sorting", "stacks", "radix-sort", "puzzle", "tile-map", "game"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
heroswap = "heroswap.cli:main"
heroswap-game = "heroswap.game:main"

[tool.hatch.build.targets.wheel]
packages = ["heroswap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
