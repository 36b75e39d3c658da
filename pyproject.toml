[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hyprutils"
version = "0.1.0"
description = "Small utilities: string splitting, signals, 2D geometry, regions, bezier curves, animation configs, file descriptors, processes and config paths"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "geometry", "bezier", "signals", "region", "xdg", "process"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
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
packages = ["hyprutils"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
