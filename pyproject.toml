[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "memshell"
version = "1.0.0"
description = "An in-memory hierarchical file system with an interactive shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "in-memory", "shell", "virtual filesystem"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
memshell = "memshell.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["memshell"]

[tool.pytest.ini_options]
addopts = "-ra"
