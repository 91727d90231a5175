"""Directional import boundaries between folders of a Python source tree."""

__version__ = "0.1.0"
