"""
weirdgen CLI tools.

This package contains the command-line tools for weirdgen:
- sample: Print weird values of a primitive type, or their category counts
- tables: Show the built-in weight tables
"""

from .main import main

__all__ = ["main"]
