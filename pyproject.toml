[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "svgsketch"
version = "0.1.0"
description = "A small SVG document builder with circles, polylines, text and composable drawable shapes"
requires-python = ">=3.10"
dependencies = []
keywords = ["svg", "vector", "graphics", "drawing"]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
svgsketch = "svgsketch.shapes:main"

[tool.hatch.build.targets.wheel]
packages = ["svgsketch"]

[tool.pytest.ini_options]
addopts = "-ra"
