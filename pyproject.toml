[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simonsays"
version = "1.0.0"
description = "A two-button Simon memory game with a Tk interface"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "simon", "memory", "tkinter", "puzzle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
simonsays = "simonsays.app:main"

[tool.hatch.build.targets.wheel]
packages = ["simonsays"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
