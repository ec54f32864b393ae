[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dxfparse"
version = "0.1.0"
description = "Read ASCII DXF drawing files into Python objects: typed tags, header info and entities"
requires-python = ">=3.10"
dependencies = []
keywords = ["dxf", "cad", "drawing", "parser", "tags"]
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dxfparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
