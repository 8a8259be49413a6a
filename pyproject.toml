[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cartelera"
version = "0.1.0"
description = "Terminal menu for browsing a catalogue of films and series, playing them and keeping ratings"
requires-python = ">=3.10"
dependencies = []
keywords = ["movies", "series", "episodes", "catalogue", "ratings", "menu", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video :: Display",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cartelera = "cartelera.ui:main"

[tool.hatch.build.targets.wheel]
packages = ["cartelera"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
