[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jadwal"
version = "0.1.0"
description = "Interactive doctor roster and 30-day shift schedule generator"
requires-python = ">=3.10"
dependencies = []
keywords = ["schedule", "roster", "shift", "doctor", "hospital"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Healthcare Industry",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jadwal = "jadwal.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["jadwal"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
