# -*- coding: utf-8 -*-
"""Data series visualisation endpoints."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Form, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import FileResponse, Response

from dataplot.config import Settings
from dataplot.errors import EncodingError
from dataplot.pipeline import process_data_series

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/goplot", tags=["viz"])

VIZ_PAGE = "viz.html"
GRAPH_SCRIPT = "graph.js"


def _client_file(request: Request, filename: str) -> Path:
    settings: Settings = request.app.state.settings
    path = Path(settings.client_dir) / filename
    if not path.is_file():
        logger.warning("Client file not found: %s", path)
        raise HTTPException(status_code=404, detail=f"{filename} not found")
    return path


@router.get("/viz")
async def viz_page(request: Request):
    """Serve the page that submits a data series and plots the result."""
    return FileResponse(_client_file(request, VIZ_PAGE), media_type="text/html")


@router.post("/viz")
async def viz_submit(request: Request, dataseries: str = Form("")):
    """
    Parse a submitted data series and fit a regression line.
    - dataseries: one ``x,y`` pair per line, malformed lines are skipped
    """
    settings: Settings = request.app.state.settings
    try:
        result = await run_in_threadpool(process_data_series, dataseries, settings.residual_mode)
    except EncodingError as exc:
        logger.exception("Data sample could not be encoded")
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    headers = {"X-Discarded-Lines": str(result.discarded_lines)}
    if result.degenerate_reason:
        headers["X-Regression-Status"] = "degenerate"
    return Response(content=result.body, media_type="application/json", headers=headers)


@router.get("/graph.js")
async def graph_script(request: Request):
    return FileResponse(_client_file(request, GRAPH_SCRIPT), media_type="application/javascript")
