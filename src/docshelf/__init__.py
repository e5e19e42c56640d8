"""Docshelf - serve a directory of Markdown documentation."""

__version__ = "0.1.0"
