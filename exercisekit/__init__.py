"""Classic programming exercises: trees, graphs, numbers, conversions, text and small models."""

__version__ = "0.1.0"