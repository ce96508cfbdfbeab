[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glmesh"
version = "0.1.0"
description = "Geometry and texture preparation for real-time 3D rendering: OBJ loading, vertex indexing, tangent space, BMP/DDS parsing, text layout and picking."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["obj", "mesh", "vbo", "tangent-space", "dds", "bmp", "picking", "opengl"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "numpy",
]

[tool.hatch.build.targets.wheel]
packages = ["glmesh"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
