[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gentracer"
version = "0.1.0"
description = "A small path tracer that renders spheres under a sky gradient to PNG or PPM images"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "path tracing", "rendering", "graphics", "png", "ppm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gentracer = "gentracer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gentracer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
