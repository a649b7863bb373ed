[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aurkit"
version = "0.1.0"
description = "Helpers for an AUR package manager front end: target splitting, orphan detection, number menus and prompts"
requires-python = ">=3.10"
dependencies = []
keywords = ["aur", "pacman", "arch", "packages", "orphans"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Software Distribution",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aurkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
