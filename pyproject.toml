[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slidecli"
version = "0.1.0"
description = "A small slide editor driven by typed commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["slides", "presentation", "editor", "command line", "shapes", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Presentation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
slidecli = "slidecli.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["slidecli"]

[tool.pytest.ini_options]
addopts = "-ra"
