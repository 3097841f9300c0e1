# This project was developed with assistance from AI tools.
"""Mortgage calculator API."""

__version__ = "0.1.0"
