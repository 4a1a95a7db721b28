[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bootanim"
version = "0.1.0"
description = "Build boot animation and boot splash images from animated GIFs or numbered still images"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["boot animation", "splash", "rgba", "gif", "image conversion"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bootanim = "bootanim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bootanim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
