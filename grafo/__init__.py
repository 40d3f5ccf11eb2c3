"""Undirected weighted graphs read from a plain text format, with a reporting command."""

__version__ = "0.1.0"