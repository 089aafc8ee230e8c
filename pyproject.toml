[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unstd"
version = "1.0.0"
description = "Small building blocks: fixed-width integer types, inclusive ranges, growable byte and string buffers, NUL-terminated string helpers and a vector with explicit capacity."
requires-python = ">=3.10"
dependencies = []
keywords = ["buffer", "bytes", "string", "vector", "integer types", "ranges"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["unstd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
