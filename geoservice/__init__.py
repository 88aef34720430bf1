"""Thread-safe planar geometry operations over WKT and GeoJSON input, with two example commands."""

__version__ = "0.1.0"
__all__ = ["service", "basic_usage", "advanced_operations"]