[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "petrol-survivor"
version = "0.1.0"
description = "Gameplay core for a top-down survivor arcade game: vectors and boxes, events, stats, upgrades, progression and enemy collision."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "survivor", "arcade", "aabb", "event-bus", "level-up"]
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
    "Topic :: Games/Entertainment :: Arcade",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["petrol_survivor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
