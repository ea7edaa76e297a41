"""Normalizer for key=value translation resource files."""

__version__ = "0.1.0"
