[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "cpsolve"
version = "0.1.0"
description = "Solutions to classic competitive programming problems, as a library and as command-line tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "algorithms", "graphs", "dynamic-programming", "cses"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cpsolve-apartments = "cpsolve.apartments:main"
cpsolve-investigation = "cpsolve.investigation:main"
cpsolve-labyrinth = "cpsolve.labyrinth:main"
cpsolve-monsters = "cpsolve.monsters:main"
cpsolve-playlist = "cpsolve.playlist:main"
cpsolve-projects = "cpsolve.projects:main"
cpsolve-towers = "cpsolve.towers:main"
cpsolve-area = "cpsolve.area:main"
cpsolve-connection = "cpsolve.connection:main"
cpsolve-flowers = "cpsolve.flowers:main"
cpsolve-managing = "cpsolve.managing:main"
cpsolve-xy = "cpsolve.xy:main"

[tool.setuptools.packages.find]
include = ["cpsolve*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
