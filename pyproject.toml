[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exercisekit"
version = "0.1.0"
description = "Classic programming exercises: trees, graphs, number puzzles, conversions, text helpers and small models"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "exercises",
    "algorithms",
    "binary-search-tree",
    "red-black-tree",
    "minimum-spanning-tree",
    "number-theory",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
exercisekit = "exercisekit.cli:main"
exercisekit-bintree = "exercisekit.bintree:main"
exercisekit-graphs = "exercisekit.graphs:main"
exercisekit-rbtree = "exercisekit.rbtree:main"

[tool.hatch.build.targets.wheel]
packages = ["exercisekit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
