[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "countryguesser"
version = "1.0.0"
description = "A terminal guessing game: find the mystery country from hints about its continent, languages, population, currency, borders and flag colours."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "quiz", "geography", "countries", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
countryguesser = "countryguesser.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["countryguesser"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
