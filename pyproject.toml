[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "falltris"
version = "1.0.0"
description = "A small falling-block puzzle game played with a game controller or the keyboard."
requires-python = ">=3.10"
keywords = ["game", "puzzle", "falling blocks", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
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
falltris = "falltris.app:main"

[tool.hatch.build.targets.wheel]
packages = ["falltris"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
