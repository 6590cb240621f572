"""Bundled data files for notectl."""
