[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tcalc"
version = "0.1.0"
description = "A keypad calculator over fixed-width integers, floating-point numbers and exact fractions"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "rational", "fraction", "arithmetic", "keypad"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tcalc = "tcalc.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
