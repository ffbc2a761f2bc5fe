"""Clinical risk and score calculators."""

__version__ = "2.0.0"
