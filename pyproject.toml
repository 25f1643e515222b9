[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtt"
version = "0.1.0"
description = "Draw bordered text tables on the terminal with per-cell width, height, padding and alignment."
requires-python = ">=3.10"
dependencies = []
keywords = ["table", "terminal", "tty", "ascii", "text"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rtt = "rtt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rtt"]

[tool.pytest.ini_options]
addopts = "-ra"
