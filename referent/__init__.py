"""Referent: article parsing and AI-assisted summarisation service."""

__version__ = "1.0.0"
