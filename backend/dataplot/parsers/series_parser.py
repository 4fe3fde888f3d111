"""Line-oriented parsing of submitted coordinate series.

A submission is plain text holding one ``x,y`` pair per line. Lines that do
not parse are dropped without surfacing an error to the caller, so a partially
malformed paste still yields a plot of whatever was readable.
"""
from __future__ import annotations

import logging
import math
import re
from typing import Any, List

from dataplot.errors import EmptyLine, InvalidNumber, LineParseError, MalformedLine
from dataplot.models import IngestReport, Point
from dataplot.parsers.base import BaseParser

LOGGER = logging.getLogger(__name__)

# Safety cap on the number of pieces a submission is split into. The last
# piece keeps the unsplit remainder.
MAX_LINES = 1_000_000

# Third field, when present, is reserved and ignored.
_MAX_FIELDS = 3

_DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_PATTERN = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_BASE_PREFIXES = ("0x", "0X", "0b", "0B", "0o", "0O")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_DEC_DIGITS = frozenset("0123456789")


def _underscores_ok(text: str) -> bool:
    """Return whether every ``_`` in ``text`` sits between two digits.

    A base prefix counts as a digit, so ``0x_1p0`` is accepted while ``_1``,
    ``1__0``, ``1_`` and ``1_.5`` are not.
    """
    body = text[1:] if text[:1] in ("+", "-") else text
    digits = _DEC_DIGITS
    previous = "start"
    if body[:2] in _BASE_PREFIXES:
        if body[1] in "xX":
            digits = _HEX_DIGITS
        body = body[2:]
        previous = "digit"

    for char in body:
        if char in digits:
            previous = "digit"
        elif char == "_":
            if previous != "digit":
                return False
            previous = "underscore"
        elif previous == "underscore":
            return False
        else:
            previous = "other"
    return previous != "underscore"


def parse_number(text: str) -> float:
    """Convert ``text`` into a finite float.

    Accepts decimal notation with optional exponent and hexadecimal floats
    with a binary exponent. ``_`` may separate digits (``1_000``,
    ``0x1_0p0``). Surrounding whitespace, misplaced underscores and
    non-finite values are rejected with ``ValueError``.
    """
    if "_" in text:
        if not _underscores_ok(text):
            raise ValueError(f"misplaced underscore: {text!r}")
        digits = text.replace("_", "")
    else:
        digits = text

    if _DECIMAL_PATTERN.fullmatch(digits):
        value = float(digits)
    elif _HEX_PATTERN.fullmatch(digits):
        try:
            value = float.fromhex(digits)
        except OverflowError as exc:
            raise ValueError(f"number out of range: {text!r}") from exc
    else:
        raise ValueError(f"not a number: {text!r}")

    if not math.isfinite(value):
        raise ValueError(f"number out of range: {text!r}")
    return value


def parse_line(line: str) -> Point:
    """Parse one raw line into a :class:`Point`.

    The emptiness check runs on the untrimmed line, so a line holding only
    whitespace is reported as :class:`MalformedLine` rather than
    :class:`EmptyLine`.
    """
    if len(line) == 0:
        raise EmptyLine(line)

    fields = line.strip().split(",", _MAX_FIELDS - 1)
    if len(fields) < 2:
        raise MalformedLine(line)

    try:
        x = parse_number(fields[0])
    except ValueError as exc:
        raise InvalidNumber(line, fields[0]) from exc
    try:
        y = parse_number(fields[1])
    except ValueError as exc:
        raise InvalidNumber(line, fields[1]) from exc

    return Point(x=x, y=y)


def split_lines(source: str) -> List[str]:
    return source.split("\n", MAX_LINES - 1)


def ingest_with_report(source: str) -> IngestReport:
    """Parse every line of ``source`` and report how many were discarded."""
    lines = split_lines(source)
    series: List[Point] = []
    discarded = 0

    for line_number, line in enumerate(lines, start=1):
        try:
            series.append(parse_line(line))
        except LineParseError as exc:
            discarded += 1
            LOGGER.debug("Skipping line %d: %s", line_number, exc)

    return IngestReport(series=series, total_lines=len(lines), discarded_lines=discarded)


def ingest(source: str) -> List[Point]:
    """Return the valid points of ``source`` in submission order."""
    return ingest_with_report(source).series


class SeriesParser(BaseParser):
    """Parse ``x,y`` per line submissions into point records."""

    def parse(self, source: str) -> list[dict[str, Any]]:
        return [point.model_dump() for point in ingest(source)]
