[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "symposium"
version = "0.1.0"
description = "A threaded dining philosophers simulation with a death-detecting monitor and an ordered event log"
requires-python = ">=3.10"
dependencies = []
keywords = ["dining philosophers", "concurrency", "threads", "simulation", "mutex"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
symposium = "symposium.app:main"

[tool.hatch.build.targets.wheel]
packages = ["symposium"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
