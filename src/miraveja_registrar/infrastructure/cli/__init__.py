"""
Command line interface.

Scans packages and writes the generated registration module.
"""

from .main import build_parser, main

__all__ = [
    "build_parser",
    "main",
]
