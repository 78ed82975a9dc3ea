[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "projsim"
version = "0.1.0"
description = "Interactive projectile motion simulator with air resistance, bouncing and Earth, Moon and Mars gravity"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["physics", "projectile", "simulation", "ballistics", "pygame"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
projsim = "projsim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["projsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
