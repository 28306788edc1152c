"""Regular-expression file finding utilities.

This package provides a command-line tool and a small library for walking a
directory tree and reporting the entries whose name or path matches a regular
expression, while pruning hidden entries and dependency directories.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("regfind")
except PackageNotFoundError:
    __version__ = "unknown"
