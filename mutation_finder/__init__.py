"""Mutation Finder - positional DNA sequence comparison toolkit."""

__version__ = "0.2.0"
