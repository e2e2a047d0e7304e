"""Run two commands connected by a pipe, with C-style string and byte helpers."""

__version__ = "0.1.0"