[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "llcmerge"
version = "0.1.0"
description = "Keep a translated tree of JSON files in step with a source tree by appending missing dataList entries"
requires-python = ">=3.10"
dependencies = []
keywords = ["translation", "localization", "json", "merge", "dataList", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Localization",
]

[project.optional-dependencies]
test = ["pytest"]

[project.gui-scripts]
llcmerge = "llcmerge.app:main"

[tool.hatch.build.targets.wheel]
packages = ["llcmerge"]

[tool.pytest.ini_options]
addopts = "-ra"
