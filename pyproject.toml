[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "magpie"
version = "0.1.0"
description = "Engine-side building blocks for a small real-time 3D renderer: maths, colours, timing, input state, cameras, scenes, shadow atlases and byte streams."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["rendering", "3d", "engine", "camera", "shadow-map", "input", "colour"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["magpie"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
