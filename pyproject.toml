[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "television"
version = "0.11.9"
description = "Building blocks for a terminal fuzzy finder: input editing, highlight-aware truncation, a de-duplicating ring buffer, file typing, shell and clipboard helpers."
requires-python = ">=3.10"
keywords = ["search", "fuzzy", "preview", "terminal", "input", "clipboard"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["television"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
