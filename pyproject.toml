[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hipplan"
version = "0.1.0"
description = "Step-by-step planning of pelvic and periacetabular osteotomy from radiograph measurements"
requires-python = ">=3.10"
dependencies = []
keywords = ["orthopaedics", "hip dysplasia", "osteotomy", "radiograph", "surgical planning"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Healthcare Industry",
    "Intended Audience :: Science/Research",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hipplan = "hipplan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hipplan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
