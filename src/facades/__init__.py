"""Perforated panel facade designer."""

__version__ = "0.1.0"
