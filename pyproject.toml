[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pctk"
version = "0.1.0"
description = "Core model of a point-and-click adventure toolkit: geometry, walk boxes, resources, script callbacks, objects and rooms."
requires-python = ">=3.10"
dependencies = []
keywords = ["adventure", "point-and-click", "game", "walkbox", "pathfinding"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pctk"]

[tool.pytest.ini_options]
addopts = "-ra"
