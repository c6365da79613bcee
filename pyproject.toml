[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rim"
version = "0.1.0"
description = "A small modal text editor for the terminal with vi-style keys"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "text-editor", "vi", "modal", "terminal", "curses"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rim = "rim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["rim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
