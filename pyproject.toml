[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "npputils"
version = "0.1.0"
description = "Small everyday utilities: colours, base64, fractions, intervals, line diffs, JSON readers, environment and process helpers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "utilities",
    "colour",
    "base64",
    "hexdump",
    "diff",
    "myers",
    "fraction",
    "complex",
    "interval",
    "json",
    "subprocess",
    "environment",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
npp-diff = "npputils.cli:diff_main"
npp-spawn = "npputils.cli:spawn_main"
npp-procinfo = "npputils.cli:procinfo_main"

[tool.hatch.build.targets.wheel]
packages = ["npputils"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
