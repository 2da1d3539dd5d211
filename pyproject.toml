[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "apekit"
version = "0.5.0"
description = "Building blocks for writing audio processors: DSP helpers, interpolation, looping signals, meters, resampling, formatting and tracing."
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "dsp", "interpolation", "resampling", "meter", "synthesis"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["apekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
