[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rscodec"
version = "0.1.0"
description = "Reed-Solomon erasure coding over GF(2^8) with Lagrange and Vandermonde encoders"
requires-python = ">=3.10"
dependencies = []
keywords = ["reed-solomon", "erasure-coding", "galois-field", "gf256", "lagrange", "vandermonde"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rs-lagrange-encode = "rscodec.cli:lagrange_encode_main"
rs-lagrange-decode = "rscodec.cli:lagrange_decode_main"
rs-vandermonde-encode = "rscodec.cli:vandermonde_encode_main"
rs-vandermonde-decode = "rscodec.cli:vandermonde_decode_main"

[tool.hatch.build.targets.wheel]
packages = ["rscodec"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
