[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raycaster"
version = "0.1.0"
description = "A textured grid raycaster with a small first-person walk-around view"
requires-python = ">=3.10"
keywords = ["raycaster", "raycasting", "game", "pygame", "first-person", "maze"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = [
    "pygame",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
raycaster = "raycaster.app:main"

[tool.hatch.build.targets.wheel]
packages = ["raycaster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
