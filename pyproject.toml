[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gameframe"
version = "0.1.0"
description = "A small game application framework: levels and actors, a GUI window registry, frame timing, path and byte helpers, and an undoable text-edit engine."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "framework", "levels", "actors", "text-edit", "undo"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gameframe = "gameframe.contents:main"

[tool.hatch.build.targets.wheel]
packages = ["gameframe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
