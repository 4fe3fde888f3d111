"""Numerical analysis of parsed sample series."""

from .regression import ResidualMode, regress

__all__ = ["ResidualMode", "regress"]
