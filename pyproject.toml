[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pagesim"
version = "0.1.0"
description = "Interactive simulator of memory management with paging"
requires-python = ">=3.10"
dependencies = []
keywords = ["paging", "memory", "operating systems", "simulator", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pagesim = "pagesim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pagesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
