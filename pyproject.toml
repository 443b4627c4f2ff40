[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "surkl"
version = "0.1.0"
description = "Colour palettes, theme management and view/window interaction state for a spatial file manager."
requires-python = ">=3.10"
dependencies = []
keywords = ["theme", "palette", "colour", "low-discrepancy", "file manager", "sqlite"]
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
    "Topic :: Desktop Environment :: File Managers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools]
packages = ["surkl"]

[tool.pytest.ini_options]
addopts = "-ra"
