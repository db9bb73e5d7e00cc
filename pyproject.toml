[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coronascene"
version = "0.1.0"
description = "Scene graph, scene objects, collision bounds, camera frames and colour conversion for a small game engine"
requires-python = ">=3.10"
keywords = ["scene graph", "game engine", "geometry", "aabb", "camera", "ycbcr"]
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
    "Topic :: Games/Entertainment",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["coronascene"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
