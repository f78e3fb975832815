[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polystring"
version = "0.1.0"
description = "A typed collection and a byte string built on it, with split, substring and concatenation, plus an interactive menu."
requires-python = ">=3.10"
dependencies = []
keywords = ["collection", "string", "split", "substring", "bytes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
polystring = "polystring.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["polystring"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
