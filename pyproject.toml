[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flaccodec"
version = "0.0.1"
description = "Bit-level FLAC stream reading and frame header decoding"
requires-python = ">=3.10"
dependencies = []
keywords = ["flac", "audio", "bitstream", "frame-header", "crc", "rice"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
flaccodec = "flaccodec.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["flaccodec"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
