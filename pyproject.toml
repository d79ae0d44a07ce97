[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "candle"
version = "0.1.0"
description = "2D lighting and shadow casting: radial and directed lights ray-cast against edges, with fog or ambient lighting areas rendered to Pillow images"
requires-python = ">=3.10"
keywords = ["lighting", "shadows", "raycasting", "2d", "graphics", "fog", "pillow"]
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
    "Topic :: Multimedia :: Graphics",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["candle"]

[tool.pytest.ini_options]
addopts = "-ra"
