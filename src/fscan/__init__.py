"""fscan - Fast directory & process scanner.

This package walks a directory tree in parallel, accumulates every file's
size into all of its ancestor directories, and reports the largest files and
folders on the console and as CSV, JSON or a summary. It can also list
running processes by memory usage.
"""

from fscan.__main__ import main

__all__ = ["main"]
