[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bytecursor"
version = "0.1.0"
description = "Cursor-style byte buffers for reading and writing fixed-width integers and floats"
requires-python = ">=3.10"
dependencies = []
keywords = ["bytes", "buffer", "cursor", "binary", "endianness"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["bytecursor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
