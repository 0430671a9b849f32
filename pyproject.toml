[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "octaraster"
version = "0.1.0"
description = "A small software rasterizer: vector and matrix math, a look-at camera, polygon prisms, a frame timer and a fixed-interval render loop."
requires-python = ">=3.10"
dependencies = []
keywords = ["rasterizer", "3d", "graphics", "camera", "matrix", "vector", "software-rendering"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
octaraster = "octaraster.app:main"

[tool.hatch.build.targets.wheel]
packages = ["octaraster"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
