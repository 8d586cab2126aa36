"""Bundled EPSG projection definitions."""
