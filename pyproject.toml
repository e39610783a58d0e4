[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exrunner"
version = "5.2.1"
description = "Drive a course of small compiler exercises: verify, watch, run, list and hint from the terminal."
requires-python = ">=3.11"
keywords = ["exercises", "teaching", "course", "watch", "verify", "learning"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]
dependencies = [
    "watchdog",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
exrunner = "exrunner.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["exrunner"]

[tool.hatch.build.targets.sdist]
include = ["exrunner", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
