"""Dining philosophers simulation: argument parsing, timing helpers, the threaded simulation and its command."""

__version__ = "1.0.0"
__all__ = ["cli", "parsing", "simulation", "timing"]