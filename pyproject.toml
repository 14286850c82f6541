[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zigo"
version = "2.0.1"
description = "Download and manage Zig compilers"
requires-python = ">=3.10"
keywords = ["zig", "compiler", "version-manager", "toolchain"]
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
    "Topic :: Software Development :: Build Tools",
]
dependencies = [
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
zigo = "zigo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["zigo"]

[tool.pytest.ini_options]
addopts = "-ra"
