"""Demo point resource shared by the ``/point`` endpoint and ``/debug/vars``."""
from __future__ import annotations

from threading import Lock
from typing import Any, Dict, Optional, Tuple

from dataplot.parsers.series_parser import parse_number


def parse_form_float(value: Optional[str]) -> float:
    """Parse a form value, treating anything unparseable as ``0.0``."""
    if value is None:
        return 0.0
    try:
        return parse_number(value)
    except ValueError:
        return 0.0


def describe_point(x: float, y: float) -> str:
    return f"point is ({x:f},{y:f})\n"


class PointResource:
    """A single mutable (x, y) point; every access holds its own lock."""

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self._lock = Lock()
        self._x = x
        self._y = y

    def increment(self) -> Tuple[float, float]:
        with self._lock:
            self._x += 1.0
            return self._x, self._y

    def set(self, x: float, y: float) -> Tuple[float, float]:
        with self._lock:
            self._x = x
            self._y = y
            return self._x, self._y

    def snapshot(self) -> Tuple[float, float]:
        with self._lock:
            return self._x, self._y

    def describe(self) -> str:
        return describe_point(*self.snapshot())

    def value(self) -> Dict[str, Any]:
        x, y = self.snapshot()
        return {"x": x, "y": y}

    def __str__(self) -> str:
        x, y = self.snapshot()
        return f"({x:f},{y:f})"
