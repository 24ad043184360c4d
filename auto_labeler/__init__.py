"""Automatic labeling of GitHub issues, discussions and pull requests."""

__version__ = "0.1.0"
