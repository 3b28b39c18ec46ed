"""A find-like filesystem search tool.

This package compiles find-style expressions (tests, actions and the operators
that combine them) into a tree of matchers and evaluates that tree against
every entry of one or more directory trees.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("pyfind")
except PackageNotFoundError:
    __version__ = "unknown"
