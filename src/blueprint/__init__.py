"""Create folder trees from indented text outlines."""

__version__ = "0.1.0"
