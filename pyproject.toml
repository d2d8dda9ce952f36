[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "airroutes"
version = "0.1.0"
description = "Register airports and flights, and list every route between two airports"
requires-python = ">=3.10"
dependencies = []
keywords = ["airports", "flights", "graph", "routes", "depth-first search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
airroutes = "airroutes.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["airroutes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
