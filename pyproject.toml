[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "savvyshopper"
version = "0.1.0"
description = "Compare product prices across Amazon and Walmart from the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["shopping", "price comparison", "amazon", "walmart", "cli"]
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
savvyshopper = "savvyshopper.runner:main"

[tool.hatch.build.targets.wheel]
packages = ["savvyshopper"]

[tool.pytest.ini_options]
addopts = "-ra"
