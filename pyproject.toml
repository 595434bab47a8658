[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skyflap"
version = "0.1.0"
description = "A side-scrolling bird-and-pipes arcade game on a small entity-component engine"
requires-python = ">=3.10"
keywords = ["game", "arcade", "entity-component", "sprites", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
skyflap = "skyflap.app:main"

[tool.hatch.build.targets.wheel]
packages = ["skyflap"]

[tool.pytest.ini_options]
addopts = "-ra"
