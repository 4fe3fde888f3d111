"""dataplot: linear regression over submitted coordinate series."""

__version__ = "1.0.0"
