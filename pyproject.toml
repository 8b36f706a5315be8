[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pharmasim"
version = "0.1.0"
description = "Building blocks of a turn-based pharmacy simulation: prices, medicines, stock, shopping lists, clients, queues, counters and a turn log."
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "pharmacy", "queue", "inventory", "turn-based"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pharmasim"]

[tool.hatch.build.targets.sdist]
include = ["pharmasim", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
