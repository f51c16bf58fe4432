"""Bundled reference data and coefficient providers."""
