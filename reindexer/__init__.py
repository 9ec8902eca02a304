# reindexer/__init__.py
"""Reindex the semantic-search demo documents through the public REST API."""

__version__ = "1.0.0"
