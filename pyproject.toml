[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nexos"
version = "0.1.0"
description = "Disk-image tooling for the XFS teaching file system and the core pieces of the XSM machine"
requires-python = ">=3.10"
dependencies = []
keywords = ["xfs", "xsm", "emulator", "file-system", "disk-image", "teaching"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
    "Topic :: System :: Filesystems",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nexos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
