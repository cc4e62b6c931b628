"""Small console calculators, converters, number checks and games."""

__version__ = "0.1.0"
__all__ = ["__version__"]