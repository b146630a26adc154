[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "notecli"
version = "0.1.0"
description = "Command-line tool for storing password-encrypted notes, one file per title"
requires-python = ">=3.10"
keywords = ["notes", "encryption", "aes-gcm", "pbkdf2", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Utilities",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
note = "notecli.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["notecli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
