[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cartor"
version = "0.1.0"
description = "Terminal drawing helpers: ANSI colours, box-drawing lines, open bubbles and multi-line text values"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "console", "ansi", "box-drawing", "text"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cartor-demo = "cartor.console:main"

[tool.hatch.build.targets.wheel]
packages = ["cartor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
