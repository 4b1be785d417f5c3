[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sleepypet"
version = "0.1.0"
description = "A desktop pet driven by a state machine of animated behaviours, simulated on a virtual screen"
requires-python = ">=3.10"
dependencies = []
keywords = ["desktop pet", "state machine", "animation", "behavior tree", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Desktop Environment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sleepypet = "sleepypet.pet:main"

[tool.hatch.build.targets.wheel]
packages = ["sleepypet"]

[tool.pytest.ini_options]
addopts = "-ra"
