[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pathtrace"
version = "0.1.0"
description = "A small Monte Carlo path tracer that renders a sphere scene into a live window"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["ray tracing", "path tracing", "rendering", "graphics", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pathtrace = "pathtrace.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pathtrace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
