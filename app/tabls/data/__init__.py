"""Bundled data files for tabls."""
