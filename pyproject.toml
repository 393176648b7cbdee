[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "phoneorient"
version = "0.1.0"
description = "Classify phone orientation from accelerometer (x, y, z) readings with a nearest-neighbour model"
requires-python = ">=3.10"
dependencies = []
keywords = ["orientation", "accelerometer", "nearest-neighbour", "classifier"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
phoneorient = "phoneorient.app:main"

[tool.hatch.build.targets.wheel]
packages = ["phoneorient"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
