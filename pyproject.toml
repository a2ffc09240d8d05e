[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "easypap"
version = "0.1.0"
description = "A small framework for writing and timing iterative image kernels, with thread barriers and work distribution"
requires-python = ">=3.10"
dependencies = []
keywords = ["parallel programming", "education", "kernels", "barrier", "benchmark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
easypap = "easypap.runner:main"

[tool.hatch.build.targets.wheel]
packages = ["easypap"]

[tool.pytest.ini_options]
addopts = "-ra"
