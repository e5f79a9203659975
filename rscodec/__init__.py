"""Reed-Solomon erasure coding over GF(2^8), with Lagrange and Vandermonde codecs and JSON commands."""

__version__ = "0.1.0"