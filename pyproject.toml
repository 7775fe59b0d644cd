[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "htmlmd"
version = "0.1.0"
description = "Building blocks for turning HTML documents into Markdown: DOM clean-up passes, escaping detectors and text helpers."
requires-python = ">=3.10"
dependencies = [
    "html5lib",
]
keywords = ["html", "markdown", "dom", "escaping", "text"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["htmlmd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
