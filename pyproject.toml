[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordlegui"
version = "0.1.0"
description = "A five-letter word guessing game with a graphical window and a terminal mode"
requires-python = ">=3.10"
keywords = ["wordle", "game", "puzzle", "words", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wordlegui = "wordlegui.app:main"
wordle-cli = "wordlegui.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wordlegui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
