[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clas12tools"
version = "0.1.0"
description = "Flatten CLAS12 reconstruction banks into per-particle columns and build analysis histograms"
requires-python = ">=3.10"
keywords = ["clas12", "nuclear physics", "histogram", "kinematics", "time of flight"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "numpy",
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["clas12tools"]

[tool.pytest.ini_options]
addopts = "-ra"
