"""Pydantic models and domain entities for the backend service."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Point(BaseModel):
    """A single (x, y) sample parsed from one submitted line."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    x: float
    y: float

    def __str__(self) -> str:
        return f"({self.x:f},{self.y:f})"


class RegressionLine(BaseModel):
    """Least-squares fit statistics returned to the plotting client."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    slope: float
    intercept: float
    std_error: float = Field(alias="stdError")
    correlation: float


class DataSample(BaseModel):
    """Response aggregate: the accepted series and its regression line.

    ``regression_line`` is ``None`` when the series is degenerate.
    """

    model_config = ConfigDict(populate_by_name=True)

    series: List[Point]
    regression_line: Optional[RegressionLine] = Field(default=None, alias="regressionLine")


class IngestReport(BaseModel):
    """Diagnostic view of one ingestion run."""

    series: List[Point]
    total_lines: int
    discarded_lines: int
