"""Submission processing: ingest, regress, encode."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from dataplot.analyzers.regression import ResidualMode, regress
from dataplot.encoder import encode
from dataplot.errors import DegenerateSeries
from dataplot.models import DataSample
from dataplot.parsers.series_parser import ingest_with_report

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    body: bytes
    data_sample: DataSample
    discarded_lines: int
    degenerate_reason: str | None = None


def build_data_sample(
    source: str,
    residual_mode: ResidualMode = ResidualMode.INHERITED,
) -> tuple[DataSample, int, str | None]:
    report = ingest_with_report(source)
    try:
        regression_line = regress(report.series, residual_mode)
    except DegenerateSeries as exc:
        logger.info("No regression line for submission: %s", exc)
        return DataSample(series=report.series), report.discarded_lines, exc.reason

    sample = DataSample(series=report.series, regression_line=regression_line)
    return sample, report.discarded_lines, None


def process_data_series(
    source: str,
    residual_mode: ResidualMode = ResidualMode.INHERITED,
) -> PipelineResult:
    """Run a raw ``dataseries`` submission through the whole pipeline.

    A degenerate series is answered with ``regressionLine: null``. Encoding
    failures propagate as :class:`~dataplot.errors.EncodingError`.
    """
    sample, discarded, reason = build_data_sample(source, residual_mode)
    body = encode(sample)
    logger.debug(
        "Processed submission: %d points kept, %d lines discarded",
        len(sample.series),
        discarded,
    )
    return PipelineResult(
        body=body,
        data_sample=sample,
        discarded_lines=discarded,
        degenerate_reason=reason,
    )
