[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meridianscan"
version = "1.0.0"
description = "Meridian-point conductance scans: user profiles, scan history, health indicators, body and bar chart data, and recommendations."
requires-python = ">=3.10"
keywords = ["meridian", "conductance", "scan", "health", "indicators"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Healthcare Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["meridianscan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
