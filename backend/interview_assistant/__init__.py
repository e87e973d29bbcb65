"""Epworth Family Resources interview and assessment service."""

__version__ = "1.0.0"
