[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vectrace"
version = "0.1.0"
description = "Spline data types, bitmap thinning, and writers for SVG, PDF, PostScript, HPGL, POV-Ray, Sketch and UGS"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "vectorization",
    "thinning",
    "bitmap",
    "spline",
    "bezier",
    "svg",
    "pdf",
    "hpgl",
]
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vectrace"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
