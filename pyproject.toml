[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "huffpress"
version = "0.1.0"
description = "Huffman file compressor with an interactive menu and a bit-text converter"
requires-python = ">=3.10"
dependencies = []
keywords = ["huffman", "compression", "decompression", "entropy-coding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
huffpress = "huffpress.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["huffpress"]

[tool.pytest.ini_options]
addopts = "-ra"
