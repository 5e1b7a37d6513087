[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "npquickopen"
version = "0.1.0"
description = "Fuzzy quick-open file finder with wildcard file filters, background directory indexing and context-menu helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["fuzzy", "quick-open", "file-finder", "wildcard", "filter", "context-menu"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: File Managers",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
npquickopen = "npquickopen.quickopen:main"

[tool.hatch.build.targets.wheel]
packages = ["npquickopen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
