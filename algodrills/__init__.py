"""Array, matrix and text-pattern exercises as small Python functions."""

__version__ = "0.1.0"
__all__ = ["arrays", "matrix", "patterns"]