"""Packaged JSON Schema resources."""
