"""
Core conversion engine: CRS registry, geometry transform, codecs.
"""
