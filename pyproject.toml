[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nitpoker"
version = "0.1.0"
description = "Poker hand evaluation primitives: ranks, suits, order-preserving evaluation codes and showdown pot shares."
requires-python = ">=3.10"
dependencies = []
keywords = ["poker", "cards", "hand evaluation", "equity", "showdown"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nitpoker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
