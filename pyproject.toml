[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bulbit"
version = "0.1.0"
description = "Building blocks for a physically based ray tracer: matrices, bounds, sampling, textures, materials and lights"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "rendering", "path tracing", "sampling", "graphics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["bulbit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
