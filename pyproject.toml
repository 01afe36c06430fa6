[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "textpane"
version = "0.7.0"
description = "Editing core of a multi-line text area: key input types, undo history, line highlighting, cursor motion and scrolling."
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["textarea", "editor", "terminal", "tui", "undo", "cursor"]
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
    "Topic :: Text Editors",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["textpane"]

[tool.pytest.ini_options]
addopts = "-ra"
