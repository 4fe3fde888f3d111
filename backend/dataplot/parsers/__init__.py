"""Parser utilities for converting raw submissions into structured data."""

from .base import BaseParser
from .series_parser import SeriesParser, ingest, ingest_with_report, parse_line

__all__ = ["BaseParser", "SeriesParser", "ingest", "ingest_with_report", "parse_line"]
