"""Tourist maps: junctions, spots and roads, their file format, editing and shortest routes."""

__version__ = "0.2.0"