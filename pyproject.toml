[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "guitarstock"
version = "0.1.0"
description = "Generate a random stock of electric guitars and report the cheapest, the most expensive, the average price and one on offer."
requires-python = ">=3.10"
dependencies = []
keywords = ["inventory", "guitars", "stock", "prices"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
guitarstock = "guitarstock.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["guitarstock"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
