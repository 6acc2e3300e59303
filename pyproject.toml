[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "corvus"
version = "0.1.0"
description = "Core engine utilities: names, GUIDs, delegates, durations, synchronisation, logging, crash handling and subsystems"
requires-python = ">=3.10"
dependencies = []
keywords = ["engine", "delegates", "guid", "subsystems", "logging", "fnv1a", "durations"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
corvus = "corvus.launch:main"

[tool.hatch.build.targets.wheel]
packages = ["corvus"]

[tool.pytest.ini_options]
addopts = "-ra"
