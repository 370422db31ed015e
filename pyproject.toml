[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ogt"
version = "0.1.0"
description = "A small OpenGL starter with a fly-through camera, shader programs, indexed meshes and a demo window"
requires-python = ">=3.10"
keywords = ["opengl", "camera", "shader", "mesh", "3d", "rendering"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ogt = "ogt.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ogt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
