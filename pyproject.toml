[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scratchkit"
version = "0.1.0"
description = "Small data structures, algorithms and system utilities for study and experiment"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linked-list",
    "binary-search-tree",
    "stack",
    "deque",
    "binary-search",
    "insertion-sort",
    "dispatch-table",
    "mandelbrot",
    "strings",
    "education",
]
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
scratchkit-strings = "scratchkit.strings_tool:main"
scratchkit-ls = "scratchkit.sysinfo:ls_main"
scratchkit-server = "scratchkit.server:main"

[tool.hatch.build.targets.wheel]
packages = ["scratchkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
