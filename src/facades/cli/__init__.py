"""Command line interface for the facade designer."""
