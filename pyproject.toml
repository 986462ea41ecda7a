[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubes"
version = "0.1.0"
description = "Core model of a block-diagram configuration editor: structured log messages, base64, zip helpers, planar graph layout, diagram item geometry and validated string properties."
requires-python = ">=3.10"
dependencies = [
    "networkx",
]
keywords = ["diagram", "logging", "base64", "zip", "planar graph", "layout", "properties"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cubes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
