[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fallen_kingdom"
version = "0.1.0"
description = "The Fallen Kingdom: Forbidden Quest, a small top-down role-playing game built on pygame"
requires-python = ">=3.10"
keywords = ["game", "rpg", "role-playing", "pygame", "top-down"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fallen-kingdom = "fallen_kingdom.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fallen_kingdom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
