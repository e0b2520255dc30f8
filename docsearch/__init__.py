"""Inverted-index search over local text documents, with a JSON-driven command line."""

__version__ = "0.1.0"