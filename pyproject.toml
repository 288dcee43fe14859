[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xyfilters"
version = "0.1.0"
description = "Parametric biquad filters matched to analog prototypes, with parameter ranges, value text and a block processor"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["audio", "dsp", "biquad", "filter", "equalizer", "iir"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["xyfilters"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
