[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arcast"
version = "0.1.0"
description = "Read podcast RSS feeds and give their episodes tidy, dated filenames"
requires-python = ">=3.10"
dependencies = []
keywords = ["podcast", "rss", "feed", "episodes", "filenames"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["arcast"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
