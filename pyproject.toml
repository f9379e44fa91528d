[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bookrender"
version = "0.1.0"
description = "Building blocks for rendering Markdown books to HTML: link fixing, header anchors, code-block post-processing, table of contents, navigation and theme loading."
requires-python = ">=3.11"
keywords = ["markdown", "book", "html", "renderer", "documentation", "static-site"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Text Processing :: Markup :: HTML",
    "Topic :: Documentation",
]
dependencies = [
    "mistune>=3",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["bookrender"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
