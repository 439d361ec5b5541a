[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mahikit"
version = "1.0.0"
description = "2D vectors and rectangles, easing functions, Perlin noise, Game of Life and Likert survey helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "vector", "tween", "easing", "perlin", "noise", "game-of-life", "likert", "survey"]
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
packages = ["mahikit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
