[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "freakland"
version = "0.2.0"
description = "Game-logic core for a first-person exploration game: AABB collision, FPS controller, cameras, input mapping and JSON scenes"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["game", "first-person", "collision", "aabb", "camera", "scene", "input"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
freakland-baker = "freakland.baker:main"

[tool.setuptools.packages.find]
include = ["freakland*"]

[tool.pytest.ini_options]
addopts = "-ra"
