"""patterncraft — report builder and prototype cloning toolkit."""

__version__ = "0.1.0"
