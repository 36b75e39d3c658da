"""Utilities for strings, signals, geometry, bezier curves, animation configs, processes and config paths."""

__version__ = "0.1.0"