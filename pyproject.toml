[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zilch"
version = "0.1.0"
description = "Pieces of a screen editor: text buffers with marks, word motion, pushback input, terminal control sequences, a message line, windows and pages"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "text-editor", "terminal", "vt100", "vt52", "buffer", "windows"]
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
    "Topic :: Text Editors",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zilch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
