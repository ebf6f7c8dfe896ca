[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termplatformer"
version = "0.1.0"
description = "A side-scrolling platformer that runs in a Linux terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "platformer", "terminal", "curses", "arcade"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
termplatformer = "termplatformer.app:main"

[tool.hatch.build.targets.wheel]
packages = ["termplatformer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
