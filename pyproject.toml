[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ayarla"
version = "0.1.0"
description = "Manages your dotfiles"
requires-python = ">=3.11"
dependencies = []
keywords = ["dotfiles", "cli", "symlink", "configuration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ayarla = "ayarla.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ayarla"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
