"""Render Python typing stub files from descriptions of types and definitions."""

__version__ = "0.15.0"