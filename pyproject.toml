[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtskit"
version = "0.1.0"
description = "Building blocks for a lockstep real-time strategy client: ring buffers, chunk lists, vector math, coordinate conversion and net event/command framing"
requires-python = ">=3.10"
dependencies = []
keywords = ["rts", "game", "ring-buffer", "lockstep", "arena", "serialization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rtskit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
