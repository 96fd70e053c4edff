[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rpnvoyager"
version = "0.9.16"
description = "A terminal RPN calculator modelled on the classic Voyager-series pocket calculators"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "rpn", "reverse-polish", "terminal", "curses", "voyager"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rpnvoyager = "rpnvoyager.ui:main"

[tool.hatch.build.targets.wheel]
packages = ["rpnvoyager"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
