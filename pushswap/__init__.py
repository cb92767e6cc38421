"""Two-stack integer moves with a fixed instruction set, plus small helpers."""

__version__ = "0.1.0"