"""Classic data structures and algorithms, with small console programs and games."""

__version__ = "0.1.0"