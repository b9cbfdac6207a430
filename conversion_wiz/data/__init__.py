"""Bundled unit configuration tables."""
