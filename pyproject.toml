[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plasmatic"
version = "0.1.0"
description = "Demoscene toys on a 320x200 256-colour screen: dithered value-noise plasma, fixed-point Perlin noise and a scrolling greetz bitmap"
requires-python = ">=3.10"
keywords = ["demoscene", "plasma", "perlin", "noise", "dithering", "bayer", "vga"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Artistic Software",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
plasmatic = "plasmatic.app:main"

[tool.hatch.build.targets.wheel]
packages = ["plasmatic"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
