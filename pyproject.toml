[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinkerbox"
version = "0.1.0"
description = "Small worked exercises, two console games and a line-based TCP chat."
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "learning", "games", "hangman", "guessing", "tcp", "chat"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinkerbox-intro = "tinkerbox.basics:main"
tinkerbox-guess = "tinkerbox.guessing:main"
tinkerbox-hangman = "tinkerbox.hangman:main"
tinkerbox-tcp = "tinkerbox.netcli:main"

[tool.hatch.build.targets.wheel]
packages = ["tinkerbox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
