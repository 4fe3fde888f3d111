"""Exception hierarchy shared by the ingestion pipeline and the service."""


class DataPlotError(Exception):
    """Base class for every error raised by the dataplot package."""


class LineParseError(DataPlotError):
    """A single submitted line could not be turned into a coordinate pair."""

    def __init__(self, line: str, message: str) -> None:
        super().__init__(message)
        self.line = line


class EmptyLine(LineParseError):
    def __init__(self, line: str = "") -> None:
        super().__init__(line, "line has no data")


class MalformedLine(LineParseError):
    def __init__(self, line: str) -> None:
        super().__init__(line, f"expected at least two comma separated fields: {line!r}")


class InvalidNumber(LineParseError):
    def __init__(self, line: str, field: str) -> None:
        super().__init__(line, f"invalid number {field!r} in line {line!r}")
        self.field = field


class DegenerateSeries(DataPlotError):
    """The series cannot be regressed (too short or zero denominator)."""

    def __init__(self, reason: str, size: int) -> None:
        super().__init__(f"degenerate series of {size} point(s): {reason}")
        self.reason = reason
        self.size = size


class EncodingError(DataPlotError):
    """The data sample could not be serialized."""


class ConfigError(DataPlotError):
    """Configuration file or environment could not be loaded."""

    def __init__(self, message: str, *, exit_code: int) -> None:
        super().__init__(message)
        self.exit_code = exit_code
